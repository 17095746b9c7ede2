from flask import (
    abort,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from voteportal.extensions import sessions
from voteportal.services.capture import VoteValidationError
from voteportal.services.catalog import DISTRICTS, district_label
from voteportal.services.identifiers import generate_session_key
from voteportal.services.session import VIEWS
from voteportal.services.voting import participation_rate, summarize, tally_catalog


def _is_xhr():
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"


def current_voting_session(create=True):
    key = session.get("voting_session_key")
    if not create:
        registered = sessions.get(key) if key else None
        return registered or sessions.transient()
    if not key:
        key = generate_session_key()
        session["voting_session_key"] = key
    return sessions.get_or_create(key)


def register_public_routes(app):
    @app.context_processor
    def inject_navigation():
        return {"views": VIEWS, "district_label": district_label}

    @app.route("/")
    def index():
        voting_session = current_voting_session(create=False)
        categories = voting_session.categories
        records = voting_session.store.records()
        config = current_app.config

        context = {
            "voting_session": voting_session,
            "active_view": voting_session.active_view,
            "total_votes": voting_session.total_votes,
            "categories": categories,
        }

        if voting_session.active_view == "results":
            return render_template(
                "results.html",
                results=tally_catalog(categories, records),
                participation=participation_rate(
                    records, baseline=config["PARTICIPATION_BASELINE"]
                ),
                **context,
            )

        if voting_session.active_view == "analytics":
            return render_template(
                "analytics.html",
                analytics=summarize(
                    categories,
                    records,
                    multiplier=config["COMPLETION_RATE_MULTIPLIER"],
                    timeline_limit=config["HOURLY_TIMELINE_LIMIT"],
                ),
                **context,
            )

        capture = voting_session.capture
        return render_template(
            "vote.html",
            capture=capture,
            confirming=capture.is_confirming(),
            refresh_after=capture.seconds_until_form(),
            districts=DISTRICTS,
            **context,
        )

    @app.route("/view/<name>")
    def select_view(name):
        if name not in dict(VIEWS):
            current_app.logger.warning("Unknown view requested: %s", name)
            abort(404)

        current_voting_session().select_view(name)
        return redirect(url_for("index"))

    @app.route("/vote/select", methods=["POST"])
    def select_option():
        capture = current_voting_session().capture
        category_id = (request.form.get("category_id") or "").strip()
        option_id = (request.form.get("option_id") or "").strip()

        try:
            capture.select(category_id, option_id)
        except VoteValidationError as exc:
            if _is_xhr():
                return jsonify({"ok": False, "error": str(exc)}), 400
            abort(400)

        if _is_xhr():
            return jsonify({"ok": True, "selections": dict(capture.selections)})
        return redirect(url_for("index"))

    @app.route("/vote", methods=["POST"])
    def submit_vote():
        voting_session = current_voting_session()
        capture = voting_session.capture

        for category in voting_session.categories:
            option_id = request.form.get(f"category_{category.id}")
            if not option_id:
                continue
            if category.option(option_id) is None:
                continue
            capture.select(category.id, option_id)

        try:
            capture.update_voter_info(
                name=request.form.get("name", ""),
                email=request.form.get("email", ""),
                district=request.form.get("district", ""),
            )
        except VoteValidationError as exc:
            current_app.logger.warning("Rejected voter info: %s", exc)
            if _is_xhr():
                return jsonify({"ok": False, "error": str(exc)}), 400
            flash(str(exc), "error")
            return redirect(url_for("index"))

        try:
            records = capture.submit(voting_session.store)
        except VoteValidationError as exc:
            current_app.logger.warning("Vote submission rejected: %s", exc)
            if _is_xhr():
                return jsonify({"ok": False, "error": str(exc)}), 400
            flash(str(exc), "error")
            return redirect(url_for("index"))

        current_app.logger.info(
            "Recorded %d votes from district %s",
            len(records),
            records[0].voter_info.district,
        )

        if _is_xhr():
            return jsonify({"ok": True, "recorded": len(records)})
        return redirect(url_for("index"))

    @app.route("/session/reset", methods=["POST"])
    def reset_session():
        key = session.pop("voting_session_key", None)
        if key:
            sessions.discard(key)
        return redirect(url_for("index"))
