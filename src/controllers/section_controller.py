from flask import Blueprint, jsonify
from utils.request_utils import get_json_body
from service import section_service

section_bp = Blueprint('section', __name__, url_prefix='/api/sections')


@section_bp.route('', methods=['GET'])
def list_sections():
    return jsonify(section_service.list_sections())


@section_bp.route('', methods=['POST'])
def create_section():
    data = get_json_body()
    section_service.create_section(data.get('name'), data.get('description'), data.get('password'))
    return jsonify({"ok": True, "message": "Section created successfully"})


@section_bp.route('/<int:section_id>', methods=['PUT'])
def update_section(section_id):
    data = get_json_body()
    section_service.update_section(section_id, data.get('name'), data.get('description'), data.get('password'))
    return jsonify({"ok": True, "message": "Section updated successfully"})


@section_bp.route('/<int:section_id>', methods=['DELETE'])
def delete_section(section_id):
    data = get_json_body()
    section_service.delete_section(section_id, data.get('password'))
    return jsonify({"ok": True, "message": "Section deleted successfully"})
