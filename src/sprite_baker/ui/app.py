"""Flask-based UI for running a bake and previewing the atlas."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, render_template_string, request, send_file

from sprite_baker.baker import run_bake
from sprite_baker.config import load_config
from sprite_baker.errors import BakeError

_INDEX_TEMPLATE = """<!doctype html>
<title>Sprite baker</title>
<h1>Sprite baker</h1>
<form method="post" action="{{ url_for('bake') }}">
  <label>Inputs <textarea name="input" rows="6" cols="60"></textarea></label><br>
  <label>Output <input name="output" value="atlas.png"></label><br>
  <label>Width <input name="width" type="number" value="512"></label>
  <label>Height <input name="height" type="number" value="512"></label><br>
  <label>Scale % <input name="scale" type="number" value="100"></label>
  <label>Padding <input name="padding" type="number" value="0"></label><br>
  <label>Background <input name="bg_color" value="0 0 0 0"></label><br>
  <label><input type="checkbox" name="trim_images"> Trim images</label>
  <label><input type="checkbox" name="sprite_format"> Sprite format</label><br>
  <label>Sprite folder <input name="sprite_folder"></label><br>
  <button type="submit">Bake</button>
</form>
<p>{{ state.message }}</p>
{% if state.output_image %}<img src="{{ url_for('atlas') }}" alt="atlas">{% endif %}
"""


@dataclass
class UIState:
    """Result of the most recent bake."""

    message: str = "Idle"
    output_image: Optional[Path] = None
    metadata_file: Optional[str] = None
    sprite_files: List[str] = field(default_factory=list)
    frames: int = 0
    elapsed_ms: float = 0.0


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


def _form_overrides(form: Any) -> Dict[str, Any]:
    background = form.get("bg_color", "").split()
    return {
        "input_files": form.get("input", "").split(),
        "output_file": form.get("output", "").strip(),
        "output_width": _optional_int(form.get("width")),
        "output_height": _optional_int(form.get("height")),
        "scale_percent": _optional_int(form.get("scale")),
        "padding": _optional_int(form.get("padding")),
        "background": [int(c) for c in background] if background else None,
        "trim_images": "trim_images" in form,
        "sprite_format": "sprite_format" in form,
        "sprite_folder": form.get("sprite_folder", "").strip() or None,
    }


def create_app() -> Flask:
    app = Flask(__name__)
    lock = threading.Lock()
    state = UIState()

    @app.route("/")
    def index() -> str:
        with lock:
            return render_template_string(_INDEX_TEMPLATE, state=state)

    @app.route("/bake", methods=["POST"])
    def bake() -> Any:
        try:
            config = load_config(None, _form_overrides(request.form))
            with lock:
                result = run_bake(config)
        except (BakeError, ValueError) as exc:
            with lock:
                state.message = f"Error: {exc}"
            return jsonify({"ok": False, "error": str(exc)}), 400

        with lock:
            state.message = "Completed"
            state.output_image = Path(result["output_image"]).resolve()
            state.metadata_file = result["metadata_file"]
            state.sprite_files = list(result["sprite_files"])
            state.frames = len(result["placements"])
            state.elapsed_ms = float(result["elapsed_ms"])
        return jsonify(
            {
                "ok": True,
                "output_image": result["output_image"],
                "metadata_file": result["metadata_file"],
                "sprite_files": result["sprite_files"],
                "frames": len(result["placements"]),
            }
        )

    @app.route("/status")
    def status() -> Any:
        with lock:
            payload = {
                "message": state.message,
                "output_image": str(state.output_image) if state.output_image else None,
                "metadata_file": state.metadata_file,
                "sprite_files": state.sprite_files,
                "frames": state.frames,
                "elapsed_ms": state.elapsed_ms,
            }
        return jsonify(payload)

    @app.route("/atlas")
    def atlas() -> Any:
        with lock:
            output_image = state.output_image
        if not output_image or not output_image.exists():
            return "", 204
        return send_file(output_image, mimetype="image/png")

    return app
