import logging
import re

from ..models import ChatContext, ChatRequest

logger = logging.getLogger(__name__)

# Intent patterns, checked in order
INTENTS = [
    ("export", re.compile(r"\b(export|publish|upload to youtube|ship|schedule|post it|go live)\b")),
    ("revise", re.compile(r"\b(revise|revision|edit|change|tweak|rewrite|shorter|longer|redo)\b")),
    ("metadata", re.compile(r"\b(metadata|title|description|tags?|keywords?|seo|chapters?)\b")),
    ("status", re.compile(r"\b(status|progress|where are we|what'?s next|next step|update)\b")),
    ("upload", re.compile(r"\b(upload|footage|clips?|media|b-?roll|assets?)\b")),
    ("help", re.compile(r"\b(help|how do|what can you|commands?)\b")),
    ("greeting", re.compile(r"^(hi|hey|hello|yo|sup)\b")),
]


class ChatResponder:
    """Stateless reply composer driven by message intent and workspace flags."""

    def respond(self, request: ChatRequest) -> str:
        intent = self.detect_intent(request.message)
        handler = getattr(self, f"_reply_{intent}")
        reply = handler(request.context)
        logger.debug("Chat intent %s", intent)
        return reply

    @staticmethod
    def detect_intent(message: str) -> str:
        text = message.lower().strip()
        for name, pattern in INTENTS:
            if pattern.search(text):
                return name
        return "fallback"

    def _reply_export(self, ctx: ChatContext) -> str:
        if ctx.has_plan and ctx.has_metadata:
            return (
                "Everything is in place: plan and metadata are ready. Package the assets, "
                "paste the title, description and tags into YouTube Studio, and schedule the upload."
            )
        missing = []
        if not ctx.has_plan:
            missing.append("a narrative plan")
        if not ctx.has_metadata:
            missing.append("a metadata package")
        return f"Before exporting we still need {' and '.join(missing)}. {self._next_step(ctx)}"

    def _reply_revise(self, ctx: ChatContext) -> str:
        if not ctx.has_plan:
            return (
                "There's no plan to revise yet. Fill in the planning brief and I'll draft "
                "a hook, storyline and voice-over you can iterate on."
            )
        reply = (
            "Adjust the tone, format or length in the planning brief and regenerate; "
            "the storyline and voice-over will follow the new direction."
        )
        if ctx.has_metadata:
            reply += " Regenerate the metadata afterwards so the title and chapters match."
        return reply

    def _reply_metadata(self, ctx: ChatContext) -> str:
        if ctx.has_metadata:
            return (
                "Your metadata package is ready. Review the title length, keep the strongest "
                "keywords up front, and double-check the chapter timestamps against the final cut."
            )
        if ctx.has_plan:
            return (
                "The plan is ready, so metadata is next. Add a mood and a platform goal and "
                "I'll draft the title, description, keywords and chapters."
            )
        return "Metadata builds on a plan. Generate the narrative plan first, then I'll handle titles and tags."

    def _reply_status(self, ctx: ChatContext) -> str:
        return f"{self._summary(ctx)} {self._next_step(ctx)}"

    def _reply_upload(self, ctx: ChatContext) -> str:
        if ctx.uploaded:
            return (
                f"You have {self._clips(ctx.uploaded)} in the workspace. Hero footage goes on the "
                "talking-head beats; the rest works as b-roll."
            )
        return "No footage yet. Drop hero clips, b-roll or audio stems into the upload area to get started."

    def _reply_help(self, ctx: ChatContext) -> str:
        return (
            "I can draft a narrative plan, build publish-ready metadata, check status, "
            f"and walk you through revisions or export. {self._next_step(ctx)}"
        )

    def _reply_greeting(self, ctx: ChatContext) -> str:
        return f"Hey! {self._summary(ctx)} {self._next_step(ctx)}"

    def _reply_fallback(self, ctx: ChatContext) -> str:
        return f"Got it. {self._summary(ctx)} {self._next_step(ctx)}"

    @staticmethod
    def _clips(count: int) -> str:
        return "1 clip" if count == 1 else f"{count} clips"

    def _summary(self, ctx: ChatContext) -> str:
        media = f"{self._clips(ctx.uploaded)} uploaded" if ctx.uploaded else "no media uploaded"
        plan = "a plan ready" if ctx.has_plan else "no plan yet"
        metadata = "metadata drafted" if ctx.has_metadata else "no metadata yet"
        return f"Right now there's {media}, {plan}, and {metadata}."

    @staticmethod
    def _next_step(ctx: ChatContext) -> str:
        if not ctx.has_plan:
            return "Next up: generate a narrative plan from your brief."
        if not ctx.has_metadata:
            return "Next up: generate the metadata package."
        return "Next up: review everything and publish."
