"""Nearby hotel suggestions from the OpenAI chat API, with a canned fallback.

``suggest_hotels`` never raises: any upstream or parsing problem yields the
static FALLBACK_HOTELS list instead.
"""
import json
import logging
from typing import Optional

from openai import OpenAI
from pydantic import ValidationError

from config import settings
from core.errors import UpstreamUnavailable
from schemas.hotel import Hotel, HotelSuggestions

logger = logging.getLogger(__name__)

# hide per-request httpx logs
logging.getLogger("httpx").setLevel(logging.WARNING)

MAX_HOTELS = 5

FALLBACK_HOTELS = [
    {"name": "Luxury Heritage Hotel", "description": "A beautiful heritage property with modern amenities.", "priceRange": "₹8,000 - ₹15,000"},
    {"name": "The Grand Residency", "description": "Centrally located with stunning city views.", "priceRange": "₹5,000 - ₹9,000"},
    {"name": "Comfort Inn", "description": "Affordable and clean rooms for budget travelers.", "priceRange": "₹2,500 - ₹4,000"},
]


def get_openai_client() -> Optional[OpenAI]:
    if not settings.OPENAI_API_KEY:
        return None
    return OpenAI(api_key=settings.OPENAI_API_KEY, timeout=settings.HOTEL_TIMEOUT_SECONDS, max_retries=0)


def build_prompt(place_name: str, latitude=None, longitude=None) -> str:
    return f"""List {MAX_HOTELS} highly-rated hotels near {place_name} (Latitude: {latitude}, Longitude: {longitude}) in India.
For each hotel, provide the name, a brief 1-sentence description, and an approximate price range in INR.

JSON format:
{{"hotels": [{{"name": "Hotel name", "description": "One sentence", "priceRange": "₹3,000 - ₹5,000"}}]}}"""


def parse_hotels(raw_text: str) -> list:
    """
    Parse the model output into Hotel objects.
    Accepts a bare JSON array or an object with a "hotels" array.
    """
    try:
        data = json.loads(raw_text or "")
    except json.JSONDecodeError as e:
        raise UpstreamUnavailable(f"Model returned invalid JSON: {e}")

    if isinstance(data, dict):
        data = data.get("hotels")
    if not isinstance(data, list):
        raise UpstreamUnavailable("Model response has no hotel list")

    hotels = []
    for item in data:
        try:
            hotels.append(Hotel.model_validate(item))
        except ValidationError:
            logger.warning(f"⚠️ Skipping malformed hotel entry: {item!r}")
        if len(hotels) == MAX_HOTELS:
            break

    if not hotels:
        raise UpstreamUnavailable("Model returned no usable hotels")
    return hotels


def fallback_suggestions() -> HotelSuggestions:
    return HotelSuggestions(
        hotels=[Hotel.model_validate(h) for h in FALLBACK_HOTELS],
        source="fallback",
    )


def _request_hotels(client: Optional[OpenAI], place_name: str, latitude, longitude) -> list:
    if client is None:
        raise UpstreamUnavailable("OPENAI_API_KEY not configured")

    try:
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": "You are an Indian travel accommodation expert. Answer only with JSON."},
                {"role": "user", "content": build_prompt(place_name, latitude, longitude)},
            ],
            temperature=0.3,
        )
        raw_text = response.choices[0].message.content
    except Exception as e:
        # network, auth, quota, timeout ... all look the same to the caller
        raise UpstreamUnavailable(str(e))

    return parse_hotels(raw_text)


def suggest_hotels(place_name: str, latitude=None, longitude=None, client=None) -> HotelSuggestions:
    logger.info(f"🏨 Hotel lookup: {place_name} ({latitude}, {longitude})")

    try:
        hotels = _request_hotels(client, place_name, latitude, longitude)
    except UpstreamUnavailable as e:
        logger.warning(f"⚠️ Hotel lookup fell back to static list: {e.message}")
        return fallback_suggestions()

    return HotelSuggestions(hotels=hotels, source="upstream")
