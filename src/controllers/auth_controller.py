from flask import Blueprint, jsonify
from utils.request_utils import get_json_body
from service.user_service import register_user, login_user

auth_bp = Blueprint('auth', __name__, url_prefix='/api')


@auth_bp.route('/register', methods=['POST'])
def register():
    data = get_json_body()
    register_user(data.get('username'), data.get('email'), data.get('password'))
    return jsonify({"ok": True, "message": "User registered successfully."})


@auth_bp.route('/login', methods=['POST'])
def login():
    data = get_json_body()
    return jsonify(login_user(data.get('username'), data.get('password')))


@auth_bp.route('/forgot-password', methods=['POST'])
def forgot_password():
    return jsonify({
        "error": "Password recovery is temporarily disabled",
        "message": "Contact the administrator if you forgot your password",
    }), 400
