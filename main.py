"""
main.py — Tree & Heap Visualizer Flask Service
===============================================
JSON service that sits between the browser front-end and the engine.
It parses user input, routes it to the selected structure and answers
with the laid-out structure ready to draw.

Routes:
  GET  /api/structures         – registry: labels, pseudocode, capabilities
  GET  /api/state              – current structure, coordinates, metrics
  POST /api/config/kind        – select BST / AVL / RBT / BH
  POST /api/insert             – insert a key
  POST /api/delete             – delete a key (BST only)
  POST /api/extract_min        – pop the minimum (BH only)
  GET  /api/search?value=N     – search path (binary trees)
  POST /api/reset              – empty the selected structure
  POST /api/history/undo       – step back one version
  POST /api/history/redo       – step forward one version
  POST /api/history/goto       – jump to version N

State management:
  Each browser session gets a Workspace kept in an in-memory map; the
  Flask session only stores the workspace id.

Configuration (defaults below, overridable with TREEVIZ_* env vars):
  KEY_MIN, KEY_MAX, MAX_KEY_DIGITS  – accepted key range
  HISTORY_LIMIT                     – versions kept per structure
  REJECT_DUPLICATES                 – ignore keys already present
  DEFAULT_KIND                      – structure selected for new sessions
  MAX_WORKSPACES                    – live sessions kept; the least
                                      recently used one is dropped first
"""

import logging
import math
import secrets
from collections import OrderedDict

from flask import Flask, jsonify, request, session

from algorithms import get_structure, list_structures
from algorithms.errors import InvalidKeyError, StructureError, UnknownStructureError
from engine import Workspace

logger = logging.getLogger(__name__)

DEFAULTS = {
    "KEY_MIN":           0,
    "KEY_MAX":           99999,
    "MAX_KEY_DIGITS":    5,
    "HISTORY_LIMIT":     100,
    "REJECT_DUPLICATES": False,
    "DEFAULT_KIND":      "BST",
    "MAX_WORKSPACES":    256,
}

KEY_ERROR_MESSAGE = "Please enter a non-negative number with up to 5 digits."


app = Flask(__name__)
app.config.from_mapping(DEFAULTS)
app.config.from_prefixed_env("TREEVIZ")
if not app.config.get("SECRET_KEY"):
    app.secret_key = secrets.token_hex(32)

# workspace id → Workspace, least recently used first
WORKSPACES: "OrderedDict[str, Workspace]" = OrderedDict()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_workspace() -> Workspace:
    """Workspace for this session, created on first use."""
    wid = session.get("workspace_id")
    if wid is None or wid not in WORKSPACES:
        wid = secrets.token_hex(8)
        WORKSPACES[wid] = Workspace(
            kind=app.config["DEFAULT_KIND"],
            history_limit=app.config["HISTORY_LIMIT"],
            reject_duplicates=app.config["REJECT_DUPLICATES"],
        )
        session["workspace_id"] = wid
        logger.info("new workspace %s", wid)
        limit = max(1, app.config["MAX_WORKSPACES"])
        while len(WORKSPACES) > limit:
            old, _ = WORKSPACES.popitem(last=False)
            logger.info("evicted idle workspace %s", old)
    else:
        WORKSPACES.move_to_end(wid)
    return WORKSPACES[wid]


def parse_key(raw) -> float:
    """
    Turn user input into a key, enforcing the configured range and digit
    limit.  Raises InvalidKeyError with the message shown to the user.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidKeyError(KEY_ERROR_MESSAGE)
    text = str(raw).strip()
    try:
        value = float(text)
    except ValueError:
        raise InvalidKeyError(KEY_ERROR_MESSAGE) from None
    if not math.isfinite(value):
        raise InvalidKeyError(KEY_ERROR_MESSAGE)
    if not (app.config["KEY_MIN"] <= value <= app.config["KEY_MAX"]):
        raise InvalidKeyError(KEY_ERROR_MESSAGE)
    if len(str(int(abs(value)))) > app.config["MAX_KEY_DIGITS"]:
        raise InvalidKeyError(KEY_ERROR_MESSAGE)
    return int(value) if value.is_integer() else value


def payload() -> dict:
    return request.get_json(silent=True) or {}


def state_response(ws: Workspace, **extra):
    data = ws.snapshot()
    data["pseudocode"] = ws.info.pseudocode
    data.update(extra)
    return jsonify(data)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
@app.errorhandler(StructureError)
def handle_structure_error(exc: StructureError):
    message = exc.args[0] if exc.args else str(exc)
    logger.warning("rejected request %s: %s", request.path, message)
    return jsonify({"error": message}), 400


# ---------------------------------------------------------------------------
# API: Registry & State
# ---------------------------------------------------------------------------
@app.route("/api/structures")
def api_structures():
    return jsonify([
        {
            "key":             info.key,
            "label":           info.label,
            "description":     info.description,
            "complexity_time": info.complexity_time,
            "tags":            info.tags,
            "pseudocode":      info.pseudocode,
            "is_heap":         info.is_heap,
            "supports": {
                "delete":      info.delete is not None,
                "extract_min": info.extract_min is not None,
                "search":      info.search is not None,
            },
        }
        for info in list_structures()
    ])


@app.route("/api/state")
def api_state():
    return state_response(get_workspace())


@app.route("/api/config/kind", methods=["POST"])
def api_config_kind():
    kind = payload().get("kind")
    if not kind:
        raise UnknownStructureError("Missing structure kind")
    get_structure(kind)
    ws = get_workspace()
    ws.select(kind)
    return state_response(ws)


# ---------------------------------------------------------------------------
# API: Operations
# ---------------------------------------------------------------------------
@app.route("/api/insert", methods=["POST"])
def api_insert():
    ws = get_workspace()
    value = parse_key(payload().get("value"))
    changed = ws.insert(value)
    return state_response(ws, changed=changed)


@app.route("/api/delete", methods=["POST"])
def api_delete():
    ws = get_workspace()
    value = parse_key(payload().get("value"))
    changed = ws.delete(value)
    return state_response(ws, changed=changed)


@app.route("/api/extract_min", methods=["POST"])
def api_extract_min():
    ws = get_workspace()
    key = ws.extract_min()
    return state_response(ws, changed=key is not None, extracted=key)


@app.route("/api/search")
def api_search():
    ws = get_workspace()
    value = parse_key(request.args.get("value"))
    node, path = ws.search(value)
    return jsonify({
        "found":   node is not None,
        "node_id": node.id if node else None,
        "path":    path,
    })


@app.route("/api/reset", methods=["POST"])
def api_reset():
    ws = get_workspace()
    ws.reset()
    return state_response(ws)


# ---------------------------------------------------------------------------
# API: History Navigation
# ---------------------------------------------------------------------------
@app.route("/api/history/undo", methods=["POST"])
def api_history_undo():
    ws = get_workspace()
    if not ws.undo():
        return jsonify({"error": "Already at first version"}), 400
    return state_response(ws)


@app.route("/api/history/redo", methods=["POST"])
def api_history_redo():
    ws = get_workspace()
    if not ws.redo():
        return jsonify({"error": "Already at last version"}), 400
    return state_response(ws)


@app.route("/api/history/goto", methods=["POST"])
def api_history_goto():
    ws = get_workspace()
    idx = payload().get("index", 0)
    if isinstance(idx, bool) or not isinstance(idx, int) or not ws.goto(idx):
        return jsonify({"error": "Invalid history index"}), 400
    return state_response(ws)


# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Tree & Heap Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, port=5000)
