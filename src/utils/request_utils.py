from flask import request


def get_json_body():
    """The request's JSON object, or an empty dict for a missing, malformed or non-object body."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
