"""
web_app.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
D-Day Counter JSON API, consumed by the front-end.
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
"""
from __future__ import annotations

import json
from datetime import date, datetime
from typing import Optional

from flask import Flask, jsonify, request

from config.settings import settings
from engine.metrics import MetricsEngine
from shared.calendar_service import supported_countries
from shared.exceptions import InvalidRange
from shared.schemas import DateRange, Metrics


def parse_date(raw: Optional[str], default: Optional[date] = None) -> date:
    """Accept ISO (YYYY-MM-DD) or the stored YYYY/MM/DD format."""
    if not raw:
        if default is None:
            raise ValueError("date is required")
        return default
    raw = raw.strip()
    for fmt in ("%Y-%m-%d", settings.date_format):
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised date: {raw!r}")


def _dump(model) -> dict:
    return json.loads(model.model_dump_json())


def create_app(engine: MetricsEngine) -> Flask:
    app = Flask(__name__)

    @app.route("/api/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/countries")
    def api_countries():
        return jsonify([
            {"code": code, "name": name} for code, name in supported_countries()
        ])

    @app.route("/api/holidays")
    def api_holidays():
        country = request.args.get("country", "")
        try:
            year = int(request.args.get("year", date.today().year))
        except ValueError:
            return jsonify({"error": "year must be an integer"}), 400
        days = sorted(engine.calendar.get_holidays(country, year))
        return jsonify({
            "country": country.strip().upper() or None,
            "year": year,
            "holidays": [d.isoformat() for d in days],
        })

    @app.route("/api/metrics")
    def api_metrics():
        try:
            start = parse_date(request.args.get("start"), default=date.today())
            end = parse_date(request.args.get("end"))
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        try:
            metrics = engine.compute_metrics(
                request.args.get("country"), DateRange(start=start, end=end)
            )
        except InvalidRange as exc:
            body = _dump(Metrics.placeholder())
            body["error"] = str(exc)
            return jsonify(body), 400
        return jsonify(_dump(metrics))

    return app


if __name__ == "__main__":
    app = create_app(MetricsEngine())
    app.run(host="0.0.0.0", port=settings.web_port, debug=False)
