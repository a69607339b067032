import logging
import threading

from models import IngredientEditor
from schemas.dto import ChatMessage
from services.gemini import GenerationError
from services.recipes import build_recipe_prompt, ingredient_list_message

logger = logging.getLogger(__name__)

class ConversationSession:
    """
    Transcript of one recipe conversation.

    idle -> submitting -> active -> submitting -> active ...
    reset() returns to idle from any state. At most one request to the
    model is outstanding at a time; a failed request is logged and
    otherwise leaves the transcript as it was.
    """

    def __init__(self, client):
        self.client = client
        self.chat_history: list[ChatMessage] = []
        self.input_text = ""
        self.is_loading = False
        self._lock = threading.Lock()

    @property
    def mode(self) -> str:
        if self.is_loading:
            return "submitting"
        return "active" if self.chat_history else "idle"

    def _begin(self) -> bool:
        with self._lock:
            if self.is_loading:
                return False
            self.is_loading = True
            return True

    def _end(self):
        with self._lock:
            self.is_loading = False

    def submit_ingredients(self, editor: IngredientEditor) -> bool:
        """Request a recipe for the named ingredients. False if nothing was sent."""
        if not editor.has_named_ingredient():
            return False
        if not self._begin():
            return False

        ingredients_list = editor.build_prompt_ingredients_list()
        prompt = build_recipe_prompt(ingredients_list)
        try:
            recipe = self.client.generate(prompt)
            self.chat_history = [
                ChatMessage(role="user", text=ingredient_list_message(ingredients_list), is_ingredient_list=True),
                ChatMessage(role="assistant", text=recipe),
            ]
        except GenerationError as e:
            logger.exception("Recipe generation failed: %s", e)
        finally:
            self._end()
        return True

    def send_follow_up(self, text: str) -> bool:
        """Append a question and resend the whole transcript. False if nothing was sent."""
        if not text.strip():
            return False
        if not self.chat_history:
            return False
        if not self._begin():
            return False

        self.input_text = text
        # the reply is applied to the history it answers, even if reset() ran meanwhile
        history = [*self.chat_history, ChatMessage(role="user", text=text)]
        self.chat_history = history
        try:
            reply = self.client.chat(history)
            self.chat_history = [*history, ChatMessage(role="assistant", text=reply)]
            self.input_text = ""
        except GenerationError as e:
            logger.exception("Follow-up reply failed: %s", e)
        finally:
            self._end()
        return True

    def reset(self):
        self.chat_history = []
        self.input_text = ""
        self.is_loading = False
