import logging
from typing import Dict, List, Optional, Tuple

from ..config import settings
from ..models import VideoPlan, VideoPlanRequest
from .text_utils import clean, format_timestamp, parse_duration_seconds, sentence, truncate

logger = logging.getLogger(__name__)

# Opening register by tone keyword, first match wins
TONE_HOOKS: List[Tuple[Tuple[str, ...], str]] = [
    (("energetic", "high-energy", "hype", "bold", "punchy", "fast"),
     "Stop scrolling: {topic} is about to change the way you work."),
    (("calm", "educational", "informative", "friendly", "clear", "teach"),
     "Here is a clear, step-by-step look at {topic}, no fluff."),
    (("cinematic", "story", "dramatic", "epic", "emotional"),
     "Every story about {topic} starts with a single moment. This is ours."),
    (("funny", "humor", "humour", "playful", "witty", "casual"),
     "{topic}, but make it fun (and actually useful)."),
]
DEFAULT_HOOK = "In the next few minutes, {topic} gets the {tone} treatment it deserves."

# Camera framing per beat for each production style
FORMAT_STYLES: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "talking_head": (
        ("talking head", "face cam", "facecam", "to camera", "interview", "podcast"),
        (
            "Talking head, tight close-up",
            "Talking head, medium shot with lower-third",
            "Talking head, punch-in on key line",
            "Talking head, wide shot with gesture",
            "Talking head, direct-to-camera close",
        ),
    ),
    "screen_capture": (
        ("screen", "capture", "tutorial", "demo", "walkthrough", "screencast"),
        (
            "Screen capture, zoomed on the problem area",
            "Screen capture with cursor highlights",
            "Screen capture, step-by-step with callouts",
            "Screen capture, before/after split",
            "Screen capture, end screen with link overlay",
        ),
    ),
    "cinematic": (
        ("cinematic", "b-roll", "broll", "vlog", "documentary", "montage"),
        (
            "Cinematic establishing shot",
            "Slow push-in on subject",
            "Handheld tracking sequence",
            "Macro detail insert",
            "Wide closing shot with title card",
        ),
    ),
}
DEFAULT_FRAMING = (
    "Opening visual",
    "Presenter explains the idea",
    "Demonstration shot",
    "Result showcase",
    "Closing card",
)

BEAT_LABELS = ("Hook", "Core idea", "Walkthrough", "Proof", "Call to action")
SHORT_FORM_SECONDS = 60


class PlanGenerator:
    """Composes a narrative plan from a creative brief.

    Total over well-typed input: every branch falls back to a default
    template instead of raising.
    """

    def __init__(
        self,
        max_field_length: Optional[int] = None,
        default_video_seconds: Optional[int] = None,
    ):
        if max_field_length is None:
            max_field_length = settings.MAX_FIELD_LENGTH
        if default_video_seconds is None:
            default_video_seconds = settings.DEFAULT_VIDEO_SECONDS
        self.max_field_length = max_field_length
        self.default_video_seconds = default_video_seconds

    def generate(self, request: VideoPlanRequest) -> VideoPlan:
        brief = self._normalise(request)
        storyline = self._storyline(brief)
        plan = VideoPlan(
            hook=self._hook(brief),
            storyline=storyline,
            shots=self._shots(brief),
            broll=self._broll(brief),
            cta=brief["cta"],
            voiceOver=self._voice_over(brief),
        )
        logger.debug("Plan composed for topic %r (%d beats)", brief["topic"], len(storyline))
        return plan

    def _normalise(self, request: VideoPlanRequest) -> Dict[str, str]:
        limit = self.max_field_length
        return {
            "topic": truncate(request.topic, limit),
            "audience": truncate(request.audience, limit),
            "tone": truncate(request.tone, limit),
            "cta": truncate(request.call_to_action, limit),
            "length": truncate(request.video_length, limit),
            "format": truncate(request.format, limit),
        }

    def _hook(self, brief: Dict[str, str]) -> str:
        tone = brief["tone"].lower()
        for keywords, template in TONE_HOOKS:
            if any(k in tone for k in keywords):
                return sentence(template.format(topic=brief["topic"]))
        return sentence(DEFAULT_HOOK.format(topic=brief["topic"], tone=tone))

    def _storyline(self, brief: Dict[str, str]) -> List[str]:
        topic, audience, fmt = brief["topic"], brief["audience"], brief["format"]
        return [
            sentence(f"Open on the problem {audience} hit with {topic}"),
            sentence(f"Reveal the one idea that makes {topic} click"),
            sentence(f"Walk through the workflow step by step, staged as {fmt}"),
            sentence(f"Show a real result {audience} can copy today"),
            sentence(f"Close with the next step: {brief['cta']}"),
        ]

    def _voice_over(self, brief: Dict[str, str]) -> List[str]:
        topic, audience = brief["topic"], brief["audience"]
        return [
            sentence(f"If you're one of the {audience} wrestling with {topic}, this one's for you"),
            sentence(f"Here's the thing nobody tells you about {topic}"),
            "Let me show you exactly how I do it, step by step.",
            sentence(f"And here's what that looks like when {audience} put it to work"),
            sentence(f"{brief['cta']}, and I'll see you in the next one"),
        ]

    @staticmethod
    def _styles(fmt: str) -> List[str]:
        fmt = fmt.lower()
        return [
            name for name, (keywords, _) in FORMAT_STYLES.items()
            if any(k in fmt for k in keywords)
        ]

    def _shots(self, brief: Dict[str, str]) -> List[str]:
        duration = parse_duration_seconds(brief["length"], self.default_video_seconds)
        styles = self._styles(brief["format"])
        beats = len(BEAT_LABELS)
        prefix = "Vertical 9:16, " if duration <= SHORT_FORM_SECONDS else ""

        shots = []
        for idx, label in enumerate(BEAT_LABELS):
            if styles:
                framing = FORMAT_STYLES[styles[idx % len(styles)]][1][idx]
            else:
                framing = DEFAULT_FRAMING[idx]
            start = format_timestamp(duration * idx // beats)
            end = format_timestamp(duration * (idx + 1) // beats)
            shots.append(f"{start}-{end} {prefix}{framing} ({label.lower()})")
        return shots

    def _broll(self, brief: Dict[str, str]) -> List[str]:
        topic = brief["topic"]
        return [
            f"Hands-on close-ups of {topic} in action",
            f"Animated text or graphics calling out key {topic} numbers",
            f"Reaction cutaways of {brief['audience']} trying it out",
            f"Atmospheric establishing shots that match a {clean(brief['tone']).lower()} mood",
        ]
