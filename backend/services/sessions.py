import threading
import uuid

from models import IngredientEditor
from services.conversation import ConversationSession

class Workspace:
    """Ingredient rows and conversation of one browser session."""

    def __init__(self, client):
        self.editor = IngredientEditor()
        self.conversation = ConversationSession(client)

    def to_dict(self):
        conv = self.conversation
        return {
            "ingredients": self.editor.to_dict(),
            "chat_history": [m.model_dump() for m in conv.chat_history],
            "is_loading": conv.is_loading,
            "input_text": conv.input_text,
            "mode": conv.mode,
            "can_generate": self.editor.has_named_ingredient() and not conv.is_loading,
        }

class WorkspaceStore:
    """In-process map of session id -> Workspace. Nothing outlives the process."""

    def __init__(self, client):
        self.client = client
        self._items: dict[str, Workspace] = {}
        self._lock = threading.Lock()

    def new_id(self) -> str:
        return str(uuid.uuid4())

    def fresh(self, sid: str) -> Workspace:
        with self._lock:
            ws = self._items[sid] = Workspace(self.client)
            return ws

    def discard(self, sid):
        with self._lock:
            self._items.pop(sid, None)

    def get(self, sid: str) -> Workspace:
        with self._lock:
            ws = self._items.get(sid)
            if ws is None:
                ws = self._items[sid] = Workspace(self.client)
            return ws

    def __len__(self):
        return len(self._items)
