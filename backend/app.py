import os
import logging
from flask import Blueprint, Flask, current_app, jsonify, render_template, request, session
from flask_cors import CORS
from pydantic import ValidationError

from config import config
from services.gemini import GeminiClient
from services.sessions import WorkspaceStore
from schemas.dto import FollowUpRequest, IngredientUpdateRequest, StateResponse

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

bp = Blueprint("recipes", __name__)

def ok(payload: dict, status=200): return jsonify(payload), status
def err(code="BAD_REQUEST", message="bad request", status=400): return jsonify({"error": {"code": code, "message": message}}), status

def store() -> WorkspaceStore:
    return current_app.extensions["workspaces"]

def workspace():
    """Workspace of the calling browser session, created on first use."""
    if "sid" not in session:
        session["sid"] = store().new_id()
    return store().get(session["sid"])

def state(ws):
    return ok(StateResponse(**ws.to_dict()).model_dump())

def refused(conv, message):
    if conv.is_loading:
        return err("BUSY", "a request is already in flight", 409)
    return err(message=message)

# --- Routes ---

@bp.get("/")
def index():
    # reloading the page discards the previous rows and transcript
    if "sid" in session:
        store().discard(session["sid"])
    session["sid"] = store().new_id()
    store().fresh(session["sid"])
    return render_template("index.html")

@bp.get("/health")
def health(): return ok({"status": "ok", "sessions": len(store())})

@bp.get("/api/state")
def get_state():
    return state(workspace())

@bp.post("/api/ingredients")
def add_ingredient():
    ws = workspace()
    ws.editor.add()
    return state(ws)

@bp.patch("/api/ingredients/<ingredient_id>")
def update_ingredient(ingredient_id):
    try:
        payload = IngredientUpdateRequest(**(request.get_json(force=True) or {}))
    except ValidationError as e:
        return err(message=e.errors()[0]["msg"])

    ws = workspace()
    ws.editor.update(ingredient_id, payload.field, payload.value)
    return state(ws)

@bp.delete("/api/ingredients/<ingredient_id>")
def remove_ingredient(ingredient_id):
    ws = workspace()
    ws.editor.remove(ingredient_id)
    return state(ws)

@bp.post("/api/recipes/generate")
def generate_recipe():
    ws = workspace()
    if not ws.conversation.submit_ingredients(ws.editor):
        return refused(ws.conversation, "at least one ingredient name is required")
    return state(ws)

@bp.post("/api/chat/messages")
def send_message():
    try:
        payload = FollowUpRequest(**(request.get_json(force=True) or {}))
    except ValidationError as e:
        return err(message=e.errors()[0]["msg"])

    ws = workspace()
    if not ws.conversation.send_follow_up(payload.text):
        return refused(ws.conversation, "generate a recipe before asking questions")
    return state(ws)

@bp.post("/api/chat/reset")
def reset_chat():
    ws = workspace()
    ws.conversation.reset()
    return state(ws)


def create_app(config_name=None, client=None):
    """Application factory; `client` replaces the Gemini client (tests)."""
    app = Flask(__name__)

    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "default")
    app.config.from_object(config[config_name])

    CORS(app, resources={r"/api/*": {"origins": "*"}})

    if client is None:
        client = GeminiClient(
            app.config["GEMINI_API_KEY"],
            api_url=app.config["GEMINI_API_URL"],
            model=app.config["GEMINI_MODEL"],
            timeout=app.config["GEMINI_TIMEOUT"],
        )
        if not client.api_key:
            app.logger.warning("GEMINI_API_KEY not set; recipe requests will fail.")
    app.extensions["workspaces"] = WorkspaceStore(client)

    app.register_blueprint(bp)
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=int(os.getenv("PORT", 5001)), debug=True)
