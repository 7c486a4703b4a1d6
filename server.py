#!/usr/bin/env python3
"""SiteSmith - HTTP API for the website build pipeline."""

import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from agents.email_sender import EmailSender
from core.errors import (
    InputValidationError,
    PipelineError,
    PrerequisiteError,
    RemoteError,
)
from core.orchestrator import Orchestrator

load_dotenv()
logging.basicConfig(level=logging.INFO)
log = logging.getLogger("sitesmith-server")

app = Flask(__name__)
history = []
_MAX_HISTORY = 50


def _error_status(error):
    if isinstance(error, (InputValidationError, PrerequisiteError)):
        return 422
    if isinstance(error, RemoteError):
        return 502
    return 500


def _get_report():
    data = request.get_json(silent=True) or {}
    return (data.get("report") or "").strip(), data


def _remember(entry):
    history.append(entry)
    del history[:-_MAX_HISTORY]


@app.route("/api/stages")
def api_stages():
    return jsonify([
        {"name": s.name, "description": s.description} for s in Orchestrator().stages
    ])


@app.route("/api/parse", methods=["POST"])
def api_parse():
    """Dry run: parse the report without touching GitHub."""
    report, _ = _get_report()
    if not report:
        return jsonify({"error": "Missing report"}), 400
    try:
        state = Orchestrator().parse(report)
    except PipelineError as e:
        return jsonify({"error": str(e), "stage": e.stage}), _error_status(e)
    result = state.to_dict()
    result["dry_run"] = True
    return jsonify(result)


@app.route("/api/build", methods=["POST"])
def api_build():
    """Run the full pipeline synchronously."""
    report, _ = _get_report()
    if not report:
        return jsonify({"error": "Missing report"}), 400
    try:
        state = Orchestrator().run_full(report)
    except PipelineError as e:
        log.error("Build failed at %s: %s", e.stage, e)
        _remember({"status": "failed", "stage": e.stage, "error": str(e)})
        return jsonify({"error": str(e), "stage": e.stage}), _error_status(e)

    result = state.to_dict()
    _remember({
        "status": state.status,
        "project_name": state.project_name,
        "repository_url": state.repository_url,
    })
    return jsonify(result)


@app.route("/api/email", methods=["POST"])
def api_email():
    report, data = _get_report()
    recipient = (data.get("to") or "").strip()
    if not report or not recipient:
        return jsonify({"error": "Missing report or recipient"}), 400
    result = EmailSender().send(
        recipient, report,
        subject=data.get("subject"),
        recipient_name=data.get("name"),
    )
    return jsonify(result), (200 if result["success"] else 502)


@app.route("/api/history")
def api_history():
    return jsonify(history)


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5001))
    print(f"SiteSmith running at http://localhost:{port}")
    app.run(debug=False, port=port)
