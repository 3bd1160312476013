import enum
import logging
import mimetypes
import os
import posixpath
from typing import NamedTuple, Optional

from werkzeug.utils import safe_join

from spa_server.services.config import EXTRA_MIME_TYPES

for _ext, _mimetype in EXTRA_MIME_TYPES.items():
    mimetypes.add_type(_mimetype, _ext)


class TargetKind(enum.Enum):
    MISSING = 'missing'
    DIRECTORY = 'directory'
    FILE = 'file'


class ResolvedTarget(NamedTuple):
    relative_path: str
    filesystem_path: Optional[str]
    kind: TargetKind


def clean_path(request_path):
    """
    Normalizes a URL path the way a URL path cleaner does.
    - Collapses '.', '..' and repeated slashes.
    - A '..' at the top stays at the top, so the result never climbs above the root.
    Returns the cleaned path relative to the root ('' for the root itself).
    """
    cleaned = posixpath.normpath('/' + (request_path or ''))
    return cleaned.lstrip('/')


def classify_target(filesystem_path):
    if filesystem_path is None or not os.path.exists(filesystem_path):
        return TargetKind.MISSING
    if os.path.isdir(filesystem_path):
        return TargetKind.DIRECTORY
    if os.path.isfile(filesystem_path):
        return TargetKind.FILE
    # Sockets, FIFOs and other special files are never served
    return TargetKind.MISSING


def resolve_target(static_root, request_path):
    """
    Joins a client supplied path onto the static root and classifies the result.
    safe_join refuses absolute segments and OS alternate separators; a refused
    join is reported as missing.
    """
    relative_path = clean_path(request_path)
    filesystem_path = safe_join(static_root, relative_path)
    return ResolvedTarget(relative_path, filesystem_path, classify_target(filesystem_path))


def check_static_root(static_root, index_document='index.html'):
    """Startup check. Only warns: the assets may be built or mounted after start."""
    if not os.path.isdir(static_root):
        logging.warning("Warning: %s does not exist. Make sure to run 'npm run build' inside 'web/' directory.",
                        static_root)
        return False

    if not os.path.isfile(os.path.join(static_root, index_document)):
        logging.warning("Fallback document %s is missing from %s; unresolved routes will return 404",
                        index_document, static_root)
    return True
