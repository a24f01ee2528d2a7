from __future__ import annotations

import io
import logging

from flask import (
    Blueprint, abort, current_app, flash, jsonify, redirect,
    render_template, request, send_file, url_for
)

from ..errors import DuplicateEntryError, EntriesAPIError, ExportValidationError, InvalidEntryError
from ..models import SESSION_TYPES, FilterCriteria
from ..services.export import ExportedDocument, export_entry, export_microcycle
from ..services.filters import apply_filters, available_microcycles
from ..store import EntryStore

logger = logging.getLogger(__name__)

bp = Blueprint("dashboard", __name__)


# ------------------------------
# Helfer
# ------------------------------
def get_store() -> EntryStore:
    return current_app.extensions["coachlog.store"]


def _load_store() -> EntryStore:
    """Store holen und ggf. laden; Ladefehler werden geloggt und angezeigt."""
    store = get_store()
    try:
        store.ensure_loaded()
    except EntriesAPIError as exc:
        logger.warning("Error fetching entries: %s", exc)
        flash("Could not load training sessions from the server.", "error")
    return store


def _download(doc: ExportedDocument):
    return send_file(
        io.BytesIO(doc.content),
        mimetype=doc.mimetype,
        as_attachment=True,
        download_name=doc.filename,
    )


# ------------------------------
# Routen
# ------------------------------
@bp.get("/")
def index():
    """Dashboard: Filter, Kennzahlen, Formular und Tabelle."""
    store = _load_store()
    state = store.view(FilterCriteria.from_mapping(request.args))
    return render_template(
        "dashboard.html",
        state=state,
        session_types=SESSION_TYPES,
        microcycles=available_microcycles(store.entries),
        filters=request.args,
    )


@bp.get("/entries.json")
def entries_json():
    """JSON: gefilterte Einträge plus Kennzahlen."""
    store = _load_store()
    state = store.view(FilterCriteria.from_mapping(request.args))
    return jsonify(
        entries=[e.to_dict() for e in state.visible],
        metrics=state.metrics.to_dict(),
    )


@bp.post("/entries")
def create_entry():
    """Neue Einheit aus dem Formular anlegen."""
    from ..services.record_parser import parse_entry_form

    try:
        entry = parse_entry_form(request.form)
    except InvalidEntryError as exc:
        flash(str(exc), "error")
        return redirect(url_for("dashboard.index"))

    store = _load_store()
    try:
        created = store.create(entry)
    except (EntriesAPIError, DuplicateEntryError) as exc:
        logger.warning("Error adding entry: %s", exc)
        flash(f"Could not save the session: {exc}", "error")
        return redirect(url_for("dashboard.index"))

    logger.info("Entry %s added for %s", created.id, created.date)
    flash("Training session saved.", "success")
    return redirect(url_for("dashboard.index"))


@bp.get("/entries/<entry_id>/export")
def export_entry_view(entry_id: str):
    """Eine Einheit als Word-Dokument herunterladen."""
    entry = _load_store().get(entry_id)
    if entry is None:
        abort(404)
    return _download(export_entry(entry))


@bp.get("/microcycles/export")
def export_microcycle_view():
    """Alle Einheiten des gewählten Mikrozyklus als Word-Dokument."""
    store = _load_store()
    criteria = FilterCriteria.from_mapping(request.args)
    entries = apply_filters(store.entries, FilterCriteria(microcycle=criteria.microcycle))
    try:
        doc = export_microcycle(criteria.microcycle, entries)
    except ExportValidationError as exc:
        flash(str(exc), "error")
        return redirect(url_for("dashboard.index", **criteria.to_args()))
    return _download(doc)
