"""
Flask web dashboard for the Bitcoin target tracker.

  GET /                — Dashboard page: price, progress bar, stats, chart, highs

API endpoints (polled by the page's JavaScript):
  GET  /api/snapshot   — Current display state (JSON)
  GET  /api/chart      — Plotly chart JSON for the three series
  GET  /api/chart/data — Raw chart snapshot (labels + series)
  GET  /api/highs      — Yearly highs ledger
  POST /api/refresh    — Run an update cycle now

The update cycle itself runs in the background scheduler; routes only read
the tracker's latest state.

Started via: python main.py web [--port 5000] [--host 127.0.0.1]
"""
import json
import logging
from datetime import datetime, timezone

from flask import Flask, render_template, jsonify

from utils.constants import ERROR_MESSAGE, NO_HIGHS_MESSAGE

logger = logging.getLogger("btctarget.web.app")


def create_app(config: dict, engines: dict) -> Flask:
    """
    Factory function. Receives initialized engines from main.py / wsgi.py.

    Args:
        config: Application config dict
        engines: dict with "tracker" (TargetTracker) and optional "scheduler"
    """
    app = Flask(__name__,
                template_folder="templates",
                static_folder="static")

    tracker = engines["tracker"]

    # ─── Template Filters ────────────────────────────────

    @app.template_filter("format_usd")
    def format_usd_filter(value):
        try:
            return f"${float(value):,.2f}"
        except (TypeError, ValueError):
            return "N/A"

    @app.template_filter("format_pct")
    def format_pct_filter(value):
        try:
            return f"{float(value):+.2f}%"
        except (TypeError, ValueError):
            return "N/A"

    # ─── Routes ──────────────────────────────────────────

    @app.route("/")
    def dashboard():
        target = tracker.target
        return render_template(
            "dashboard.html",
            display=tracker.state.display,
            target_price=target.price,
            target_date=target.date.date().isoformat(),
            start_date=target.start.date().isoformat(),
            interval_ms=target.interval_seconds * 1000,
            no_highs_message=NO_HIGHS_MESSAGE,
            error_message=ERROR_MESSAGE,
        )

    @app.route("/api/snapshot")
    def api_snapshot():
        state = tracker.state
        resp = tracker.state.display.to_dict()
        resp["target_price"] = tracker.target.price
        resp["target_date"] = tracker.target.date.isoformat()
        resp["price"] = state.quote.price if state.quote else None
        resp["last_update"] = state.last_update.isoformat() if state.last_update else None
        resp["timestamp"] = datetime.now(timezone.utc).isoformat()
        return jsonify(resp)

    @app.route("/api/chart")
    def api_chart():
        import plotly.io as pio
        from web.charts import price_target_chart

        try:
            fig = price_target_chart(tracker.state.chart)
            return json.loads(pio.to_json(fig))
        except Exception as e:
            logger.error(f"Chart generation error: {e}")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/chart/data")
    def api_chart_data():
        return jsonify(tracker.state.chart.to_dict())

    @app.route("/api/highs")
    def api_highs():
        records = [r.to_dict() for r in tracker.ledger.records]
        return jsonify({
            "year": tracker.target.year,
            "running_max": tracker.ledger.running_max,
            "highs": records,
            "count": len(records),
        })

    @app.route("/api/refresh", methods=["POST"])
    def api_refresh():
        refreshed = tracker.run_cycle()
        status = 200 if refreshed else 503
        return jsonify({
            "refreshed": refreshed,
            "error": tracker.state.display.error,
        }), status

    return app
