from flask import Blueprint, request, jsonify
from utils.request_utils import get_json_body
from service import photo_service
from service.errors import ValidationError
from utils.auth_utils import login_required, current_user_id

photo_bp = Blueprint('photo', __name__, url_prefix='/api/photos')


@photo_bp.route('', methods=['POST'])
@login_required
def upload_photos():
    files = request.files.getlist('photos')
    count = photo_service.upload_photos(current_user_id(), files, request.form.get('section_id'))
    return jsonify({
        "ok": True,
        "message": f"{count} photo{'s' if count > 1 else ''} uploaded successfully",
    })


@photo_bp.route('', methods=['GET'])
def list_photos():
    section_id = request.args.get('section_id') or None
    if section_id is not None:
        try:
            section_id = int(section_id)
        except ValueError:
            raise ValidationError("Invalid section")
    return jsonify(photo_service.list_photos(section_id))


@photo_bp.route('/top', methods=['GET'])
def top_photos():
    return jsonify(photo_service.top_photos())


@photo_bp.route('/<int:photo_id>/vote', methods=['POST'])
@login_required
def vote(photo_id):
    photo_service.vote_photo(current_user_id(), photo_id)
    return jsonify({"ok": True})


@photo_bp.route('/<int:photo_id>/comment', methods=['POST'])
@login_required
def add_comment(photo_id):
    data = get_json_body()
    photo_service.add_comment(current_user_id(), photo_id, data.get('comment'))
    return jsonify({"ok": True})


@photo_bp.route('/<int:photo_id>/comments', methods=['GET'])
def list_comments(photo_id):
    return jsonify(photo_service.list_comments(photo_id))


@photo_bp.route('/<int:photo_id>', methods=['DELETE'])
@login_required
def delete_photo(photo_id):
    photo_service.delete_own_photo(current_user_id(), photo_id)
    return jsonify({"ok": True, "message": "Photo deleted successfully"})


@photo_bp.route('/<int:photo_id>/tag', methods=['POST'])
@login_required
def toggle_tag(photo_id):
    tagged = photo_service.toggle_tag(current_user_id(), photo_id)
    return jsonify({"tagged": tagged})


@photo_bp.route('/<int:photo_id>/tagged', methods=['GET'])
@login_required
def is_tagged(photo_id):
    return jsonify({"tagged": photo_service.is_tagged(current_user_id(), photo_id)})
