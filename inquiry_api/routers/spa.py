# inquiry_api/routers/spa.py
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from inquiry_api.config import Settings
from inquiry_api.deps import get_app_settings

# Registered last: anything no other route claimed ends up here.
router = APIRouter(tags=["spa"])


def resolve_static(static_dir: str, full_path: str) -> Path | None:
    """Return the file to serve for `full_path`, or None when the SPA build is missing."""
    root = Path(static_dir).resolve()
    index = root / "index.html"
    if full_path:
        try:
            candidate = (root / full_path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return candidate
        except (ValueError, OSError):
            # embedded NUL, over-long names and the like: not a file we ship
            pass
    return index if index.is_file() else None


@router.get("/{full_path:path}", include_in_schema=False)
def serve_spa(full_path: str, settings: Settings = Depends(get_app_settings)):
    if full_path == "api" or full_path.startswith("api/"):
        return JSONResponse({"success": False, "message": "Not found"}, status_code=404)

    target = resolve_static(settings.STATIC_DIR, full_path)
    if target is None:
        return JSONResponse({"success": False, "message": "Front-end build not found"}, status_code=404)
    return FileResponse(target)
