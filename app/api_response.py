"""
Response helpers — one fixed status code per outcome kind.

Error bodies are always {"error": <message>}; callers pass fixed strings,
never exception text.
"""
from flask import jsonify


def ok(data):
    return jsonify(data), 200


def created(data):
    return jsonify(data), 201


def bad_request(message='Bad request'):
    return jsonify({'error': message}), 400


def unauthorized(message='Unauthorized'):
    return jsonify({'error': message}), 401


def conflict(message='Conflict'):
    return jsonify({'error': message}), 409


def server_error(message='Internal server error'):
    return jsonify({'error': message}), 500
