from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.responses import error_response, unexpected_error_response
from ..core.constants import DEFAULT_HISTORY_LIMIT
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

    def _optional_date(name: str):
        value = request.args.get(name)
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{name} must be YYYY-MM-DD")

    def _int_arg(name: str, default: int) -> int:
        value = request.args.get(name)
        if value is None or value == "":
            return default
        try:
            return int(value)
        except ValueError:
            raise ValidationError(f"{name} must be an integer")

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    def check_in():
        try:
            data = _json_body()
            result = container.attendance_service.check_in(
                data.get("employee_id"),
                latitude=data.get("latitude"),
                longitude=data.get("longitude"),
                face_match_score=data.get("face_match_score"),
                location_id=data.get("location_id") or None,
            )
            return jsonify(result.to_dict()), 200
        except DomainError as e:
            return error_response(e, debug=_debug())
        except Exception as e:
            return unexpected_error_response(e, message="Terjadi kesalahan sistem saat melakukan check-in", debug=_debug())

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    def check_out():
        try:
            data = _json_body()
            result = container.attendance_service.check_out(
                data.get("employee_id"),
                latitude=data.get("latitude"),
                longitude=data.get("longitude"),
                face_match_score=data.get("face_match_score"),
            )
            return jsonify(result.to_dict()), 200
        except DomainError as e:
            return error_response(e, debug=_debug())
        except Exception as e:
            return unexpected_error_response(e, message="Terjadi kesalahan sistem saat melakukan check-out", debug=_debug())

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    def today():
        try:
            view = container.attendance_service.today(request.args.get("employee_id") or None)
            return jsonify(view.to_dict()), 200
        except DomainError as e:
            return error_response(e, debug=_debug())
        except Exception as e:
            return unexpected_error_response(e, message="Gagal mengambil data absensi hari ini", debug=_debug())

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    def history():
        try:
            records = container.attendance_service.history(
                request.args.get("employee_id") or None,
                start_date=_optional_date("start_date"),
                end_date=_optional_date("end_date"),
                limit=_int_arg("limit", DEFAULT_HISTORY_LIMIT),
                offset=_int_arg("offset", 0),
            )
            return jsonify({"success": True, "data": [r.to_dict() for r in records]}), 200
        except DomainError as e:
            return error_response(e, debug=_debug())
        except Exception as e:
            return unexpected_error_response(e, message="Gagal mengambil riwayat absensi", debug=_debug())
