from flask import Blueprint, jsonify
from utils.request_utils import get_json_body
from service import admin_service
from utils.auth_utils import admin_required, current_user_id

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')


@admin_bp.route('/dashboard', methods=['GET'])
@admin_required
def dashboard():
    return jsonify({"stats": admin_service.get_dashboard_stats()})


@admin_bp.route('/users', methods=['GET'])
@admin_required
def list_users():
    return jsonify(admin_service.list_managed_users())


@admin_bp.route('/users/<int:user_id>', methods=['GET'])
@admin_required
def get_user(user_id):
    return jsonify(admin_service.get_managed_user_profile(user_id))


@admin_bp.route('/users/<int:user_id>/ban', methods=['POST'])
@admin_required
def ban_user(user_id):
    data = get_json_body()
    message = admin_service.set_user_ban(current_user_id(), user_id, bool(data.get('is_banned')))
    return jsonify({"ok": True, "message": message})


@admin_bp.route('/users/<int:user_id>', methods=['DELETE'])
@admin_required
def delete_user(user_id):
    admin_service.delete_user(current_user_id(), user_id)
    return jsonify({"ok": True, "message": "User deleted successfully"})


@admin_bp.route('/photos', methods=['GET'])
@admin_required
def list_photos():
    return jsonify(admin_service.list_all_photos())


@admin_bp.route('/photos/<int:photo_id>', methods=['DELETE'])
@admin_required
def delete_photo(photo_id):
    admin_service.delete_any_photo(current_user_id(), photo_id)
    return jsonify({"ok": True, "message": "Photo deleted successfully"})


@admin_bp.route('/logs', methods=['GET'])
@admin_required
def list_logs():
    return jsonify(admin_service.list_admin_logs())


@admin_bp.route('/logs/clear', methods=['DELETE'])
@admin_required
def clear_logs():
    admin_service.clear_admin_logs(current_user_id())
    return jsonify({"ok": True, "message": "All logs have been cleared successfully"})
