from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..common.responses import error_response, unexpected_error_response
from ..core.exceptions import DomainError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _debug() -> bool:
        return bool(current_app.config.get("DEBUG"))

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    @app.route("/api/face-recognition/register", methods=["POST"], endpoint="face_register")
    def face_register():
        try:
            data = _json_body()
            container.face_service.enroll(
                data.get("employee_id"),
                data.get("face_descriptor"),
                training_score=data.get("training_score"),
            )
            return jsonify({"success": True, "message": "Face registered successfully"}), 200
        except DomainError as e:
            return error_response(e, debug=_debug())
        except Exception as e:
            return unexpected_error_response(e, message="Face registration failed", debug=_debug())

    @app.route("/api/face-recognition/verify", methods=["POST"], endpoint="face_verify")
    def face_verify():
        try:
            data = _json_body()
            result = container.face_service.verify(data.get("employee_id"), data.get("face_descriptor"))
            return jsonify(result.to_dict()), 200
        except DomainError as e:
            return error_response(e, debug=_debug())
        except Exception as e:
            return unexpected_error_response(e, message="Face verification failed", debug=_debug())
