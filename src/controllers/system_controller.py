from flask import Blueprint, jsonify, send_from_directory
from service.system_service import check_database
from service.storage_service import get_upload_dir
import logging

system_bp = Blueprint('system', __name__)


@system_bp.route('/api/test-db', methods=['GET'])
def test_db():
    try:
        return jsonify(check_database())
    except Exception as e:
        logging.exception("Database check failed")
        return jsonify({"error": f"Database error: {e}"}), 500


@system_bp.route('/api/test-email', methods=['GET'])
def test_email():
    return jsonify({
        "error": "Email test is disabled",
        "message": "Email delivery is temporarily disabled",
    }), 400


@system_bp.route('/uploads/<path:filename>', methods=['GET'])
def uploaded_file(filename):
    return send_from_directory(get_upload_dir(), filename)
