from flask import jsonify


def send_response(status: int, success: bool, message: str, data=None):
    body = {"success": success, "message": message}
    if data is not None:
        body["data"] = data
    return jsonify(body), status
