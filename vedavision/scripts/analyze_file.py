"""
One-shot analysis of a local photo, bypassing the web UI.

Usage:
  python vedavision/scripts/analyze_file.py path/to/leaf.jpg

Uses the same intake checks and GeminiVision adapter as the server, prints the
result as JSON and the status log.
"""
import base64
import mimetypes
import sys
from pathlib import Path

ROOT = Path(__file__).parents[2]
sys.path.insert(0, str(ROOT))

from vedavision.adapters.vision.gemini_vision import GeminiVision
from vedavision.orchestrator.errors import VedaVisionError
from vedavision.services.intake import accept_image
from vedavision.services.settings import Settings
from vedavision.services.status_store import StatusStore

if len(sys.argv) != 2:
    print(__doc__)
    sys.exit(2)

path = Path(sys.argv[1])
if not path.exists():
    print(f"[ERROR] {path} not found")
    sys.exit(1)

settings = Settings.from_env()
status = StatusStore()
vision = GeminiVision(status, settings)

media_type = mimetypes.guess_type(path.name)[0] or "image/jpeg"
data_url = f"data:{media_type};base64,{base64.standard_b64encode(path.read_bytes()).decode('ascii')}"

try:
    result = vision.analyze(accept_image(data_url, settings))
    print(result.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    code = 0
except VedaVisionError as e:
    print(f"[ERROR] {type(e).__name__}: {e.message}")
    code = 1

print()
for line in status.logs:
    print(f"  {line}")
sys.exit(code)
