import logging
import re
from typing import Iterable, List, Optional, Tuple

from ..config import settings
from ..models import Chapter, MetadataRequest, VideoMetadata
from .text_utils import clean, format_timestamp, split_list, terms, truncate, words

logger = logging.getLogger(__name__)

MAX_KEYWORD_LENGTH = 40
CHAPTER_LABEL_LENGTH = 60
HASHTAG_COUNT = 3

# Advisory tips by platform goal, first matching family wins
GOAL_TIPS: List[Tuple[Tuple[str, ...], Tuple[str, ...]]] = [
    (("subscrib", "grow", "follower", "channel"), (
        "Ask for the subscribe right after the biggest payoff, not in the intro.",
        "Add an end screen pointing to the next video in the series.",
        "Keep thumbnail styling consistent so returning viewers recognise the channel.",
    )),
    (("watch time", "retention", "view duration", "binge", "watch-time"), (
        "Deliver the promise of the title within the first 30 seconds.",
        "Use pattern interrupts (cuts, b-roll, on-screen text) every 20 to 40 seconds.",
        "Group this upload into a playlist so autoplay keeps the session going.",
    )),
    (("rank", "search", "seo", "discover", "tutorial"), (
        "Put the main keyword in the first 60 characters of the title.",
        "Repeat the core search phrase naturally in the first two lines of the description.",
        "Add chapters so individual sections can surface in search results.",
    )),
    (("comment", "engage", "share", "community", "like"), (
        "End with a specific question viewers can answer in one line.",
        "Pin a comment that starts the conversation within the first hour.",
        "Reply to early comments to signal an active community.",
    )),
    (("sale", "lead", "sign up", "signup", "click", "download", "traffic", "convert"), (
        "Place the link in the first line of the description, above the fold.",
        "Mention the offer verbally at the midpoint and again at the close.",
        "Use a pinned comment and end screen link that repeat the same call to action.",
    )),
]
DEFAULT_TIPS = (
    "Front-load the hook in the first 5 seconds to protect retention.",
    "Test two thumbnail variants and keep the higher click-through rate.",
    "Add chapters and a keyword-rich first paragraph to the description.",
)
GENERIC_LEAD_TIP = "Pick one measurable goal for this upload and check it in analytics after 48 hours."


class MetadataGenerator:
    """Derives publish-ready metadata from a plan and a distribution brief."""

    def __init__(
        self,
        title_max_length: Optional[int] = None,
        keyword_limit: Optional[int] = None,
        chapter_spacing_seconds: Optional[int] = None,
    ):
        if title_max_length is None:
            title_max_length = settings.TITLE_MAX_LENGTH
        if keyword_limit is None:
            keyword_limit = settings.KEYWORD_LIMIT
        if chapter_spacing_seconds is None:
            chapter_spacing_seconds = settings.CHAPTER_SPACING_SECONDS
        self.title_max_length = title_max_length
        self.keyword_limit = keyword_limit
        self.chapter_spacing_seconds = chapter_spacing_seconds

    def generate(self, request: MetadataRequest) -> VideoMetadata:
        chapters = self.build_chapters(request.plan_details.storyline)
        keywords = self.build_keywords(request)
        metadata = VideoMetadata(
            title=self.build_title(request),
            description=self.build_description(request, chapters, keywords),
            keywords=keywords,
            chapters=chapters,
            optimisationTips=self.build_tips(request),
        )
        logger.debug(
            "Metadata composed: %d keywords, %d chapters",
            len(metadata.keywords),
            len(metadata.chapters),
        )
        return metadata

    def build_title(self, request: MetadataRequest) -> str:
        topic = clean(request.plan.topic)
        fragment = _first_sentence(request.plan_details.hook)
        if fragment and fragment.lower() != topic.lower():
            title = f"{topic} | {fragment}"
        else:
            title = f"{topic} for {clean(request.plan.audience)}"
        return truncate(title, self.title_max_length)

    def build_description(
        self,
        request: MetadataRequest,
        chapters: List[Chapter],
        keywords: List[str],
    ) -> str:
        plan = request.plan_details
        paragraphs = []

        intro = clean(plan.hook)
        brief = f"Made for {clean(request.plan.audience)} with a {clean(request.mood).lower()} feel"
        goal = clean(request.platform_goal)
        brief += f", this video is built to {goal.lower().rstrip('.!?')}." if words(goal) else "."
        paragraphs.append(f"{intro} {brief}" if intro else brief)

        beats = [clean(beat) for beat in plan.storyline if clean(beat)]
        if beats:
            paragraphs.append("In this video:\n" + "\n".join(f"- {beat}" for beat in beats))

        if chapters:
            paragraphs.append(
                "Chapters:\n"
                + "\n".join(f"{chapter.timestamp} {chapter.label}" for chapter in chapters)
            )

        if clean(plan.cta):
            paragraphs.append(f"Next step: {clean(plan.cta)}")

        hashtags = [_hashtag(k) for k in keywords[:HASHTAG_COUNT]]
        hashtags = [h for h in hashtags if len(h) > 1]
        if hashtags:
            paragraphs.append(" ".join(hashtags))

        return "\n\n".join(paragraphs)

    def build_keywords(self, request: MetadataRequest) -> List[str]:
        topic = clean(request.plan.topic).lower()
        audience = clean(request.plan.audience).lower()

        topic_terms = terms(topic)
        # Topic phrases only when the topic has real words
        phrase_topic = bool(topic_terms)

        candidates: List[str] = [topic] if phrase_topic else []
        candidates += topic_terms
        candidates += split_list(audience)
        if phrase_topic:
            candidates += [f"{topic} for {item}" for item in split_list(audience)[:1]]
        candidates += terms(request.mood)
        if phrase_topic:
            candidates += [f"{topic} tips", f"{topic} tutorial"]
        candidates += terms(request.platform_goal)

        return _unique(candidates, self.keyword_limit)

    def build_chapters(self, storyline: List[str]) -> List[Chapter]:
        chapters = []
        for idx, beat in enumerate(storyline):
            label = _first_sentence(beat) or f"Part {idx + 1}"
            chapters.append(
                Chapter(
                    label=truncate(label, CHAPTER_LABEL_LENGTH),
                    timestamp=format_timestamp(idx * self.chapter_spacing_seconds),
                )
            )
        return chapters

    def build_tips(self, request: MetadataRequest) -> List[str]:
        goal = clean(request.platform_goal)
        lowered = goal.lower()
        for keywords, tips in GOAL_TIPS:
            if any(k in lowered for k in keywords):
                family = tips
                break
        else:
            family = DEFAULT_TIPS
        if words(goal):
            lead = f"Optimise every decision for the goal: {truncate(goal, 80).rstrip('.!?')}."
        else:
            lead = GENERIC_LEAD_TIP
        return [lead, *family]


def _first_sentence(text: str) -> str:
    text = clean(text)
    match = re.match(r"(.+?)[.!?…](?:\s|$)", text)
    first = match.group(1) if match else text
    return first.rstrip(" .!?…")


def _hashtag(keyword: str) -> str:
    return "#" + re.sub(r"[^\w]", "", keyword)


def _unique(candidates: Iterable[str], limit: int) -> List[str]:
    seen = set()
    result = []
    for candidate in candidates:
        if len(result) >= limit:
            break
        keyword = clean(candidate).strip(" ,.;:!?").lower()
        if not keyword or len(keyword) > MAX_KEYWORD_LENGTH or keyword in seen:
            continue
        seen.add(keyword)
        result.append(keyword)
    return result
