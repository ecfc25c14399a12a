from flask import Blueprint, request, jsonify
from service import user_service
from service.photo_service import list_user_photos, list_tagged_photos
from utils.auth_utils import login_required, current_user_id

user_bp = Blueprint('user', __name__, url_prefix='/api')


@user_bp.route('/user/photos', methods=['GET'])
@login_required
def my_photos():
    return jsonify(list_user_photos(current_user_id()))


@user_bp.route('/user/stats', methods=['GET'])
@login_required
def my_stats():
    return jsonify(user_service.get_user_stats(current_user_id()))


@user_bp.route('/user/tagged-photos', methods=['GET'])
@login_required
def my_tagged_photos():
    return jsonify(list_tagged_photos(current_user_id()))


@user_bp.route('/user/profile-picture', methods=['POST'])
@login_required
def upload_profile_picture():
    file_storage = request.files.get('profile_picture')
    return jsonify(user_service.set_profile_picture(current_user_id(), file_storage))


@user_bp.route('/user/profile-picture', methods=['GET'])
@login_required
def get_profile_picture():
    return jsonify(user_service.get_profile_picture(current_user_id()))


@user_bp.route('/users', methods=['GET'])
@login_required
def list_users():
    return jsonify(user_service.list_users())


@user_bp.route('/users/<int:user_id>', methods=['GET'])
@login_required
def get_user_profile(user_id):
    return jsonify(user_service.get_user_profile(user_id))
