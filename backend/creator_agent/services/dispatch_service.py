import logging
from typing import Any, Callable, Dict, Optional, Tuple

from .chat_service import ChatResponder
from .metadata_service import MetadataGenerator
from .plan_service import PlanGenerator
from .validation_service import ACTIONS, RequestValidationFailed, validate_request

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Unable to process request"


class RequestDispatcher:
    """Single entry point: validate, route by action, wrap the result.

    ``handle`` always returns ``(status_code, envelope)`` and never raises.
    """

    def __init__(
        self,
        plan_generator: Optional[PlanGenerator] = None,
        metadata_generator: Optional[MetadataGenerator] = None,
        chat_responder: Optional[ChatResponder] = None,
    ):
        self.plan_generator = PlanGenerator() if plan_generator is None else plan_generator
        self.metadata_generator = MetadataGenerator() if metadata_generator is None else metadata_generator
        self.chat_responder = ChatResponder() if chat_responder is None else chat_responder

        # action -> (response key, handler)
        self.routes: Dict[str, Tuple[str, Callable[[Any], Any]]] = {
            "planVideo": ("plan", self._plan),
            "generateMetadata": ("metadata", self._metadata),
            "chat": ("reply", self._chat),
        }
        unrouted = set(ACTIONS) - set(self.routes)
        if unrouted:
            raise RuntimeError(f"No route for action(s): {', '.join(sorted(unrouted))}")

    def handle(self, body: Any) -> Tuple[int, Dict[str, Any]]:
        try:
            request = validate_request(body)
        except RequestValidationFailed as e:
            logger.info("Rejected request with %d issue(s)", len(e.issues))
            return 400, {
                "success": False,
                "error": [issue.model_dump() for issue in e.issues],
            }

        key, handler = self.routes[request.action]
        try:
            result = handler(request.payload)
        except Exception:
            logger.exception("Generation failed for action %s", request.action)
            return 400, {"success": False, "error": GENERIC_ERROR}

        logger.info("Completed action %s", request.action)
        return 200, {"success": True, key: result}

    def _plan(self, payload):
        return self.plan_generator.generate(payload).model_dump(by_alias=True)

    def _metadata(self, payload):
        return self.metadata_generator.generate(payload).model_dump(by_alias=True)

    def _chat(self, payload):
        return self.chat_responder.respond(payload)
