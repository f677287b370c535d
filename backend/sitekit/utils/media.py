import os
import re
import time
import uuid
from werkzeug.utils import secure_filename

ALLOWED_EXTENSIONS = {
    'png', 'jpg', 'jpeg', 'gif', 'webp', 'svg', 'avif',
    'mp4', 'mov', 'avi', 'webm',
    'pdf',
}

def file_extension(filename):
    if '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[1].lower()

def allowed_file(filename):
    return file_extension(filename) in ALLOWED_EXTENSIONS

def generate_filename(original_name):
    """
    Build a collision-free storage name: <millis>-<16 hex>-<stem>.<ext>
    """
    safe = secure_filename(original_name) or "file"
    ext = file_extension(safe)
    stem = safe[: -(len(ext) + 1)] if ext else safe
    stem = re.sub(r"[^a-zA-Z0-9]", "-", stem) or "file"
    millis = int(time.time() * 1000)
    random_id = uuid.uuid4().hex[:16]
    return f"{millis}-{random_id}-{stem}.{ext}" if ext else f"{millis}-{random_id}-{stem}"

def stream_size(stream):
    """Size of a seekable upload stream, leaving the cursor at the start."""
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size
