import os
import time
import logging
from flask import current_app
from werkzeug.utils import secure_filename


def get_upload_dir():
    upload_dir = os.path.abspath(current_app.config["UPLOAD_DIR"])
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir


def build_filename(original_name):
    """
    Stored name is the upload time in epoch milliseconds followed by the
    sanitised original name, e.g. ``1718000000000-beach.jpg``.
    """
    name = secure_filename(original_name or "") or "upload"
    return f"{int(time.time() * 1000)}-{name}"


def save_upload(file_storage):
    filename = build_filename(file_storage.filename)
    path = os.path.join(get_upload_dir(), filename)
    # two files with the same name in the same millisecond
    suffix = 1
    while os.path.exists(path):
        filename = build_filename(f"{suffix}-{file_storage.filename}")
        path = os.path.join(get_upload_dir(), filename)
        suffix += 1
    file_storage.save(path)
    logging.info(f"Stored upload {filename}")
    return filename


def remove_upload(filename):
    if not filename:
        return False
    path = os.path.join(get_upload_dir(), os.path.basename(filename))
    if os.path.exists(path):
        os.remove(path)
        logging.info(f"Removed stored file {filename}")
        return True
    logging.warning(f"Stored file not found: {filename}")
    return False


def upload_url(filename):
    return f"/uploads/{filename}" if filename else None
