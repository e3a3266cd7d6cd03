"""Simple two-language (en/sv) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "en": "Analemma",
        "sv": "Analemma",
    },
    "subtitle": {
        "en": "Visualize the sun's position throughout the year",
        "sv": "Se solens position över hela året",
    },
    "label_latitude": {
        "en": "Latitude",
        "sv": "Latitud",
    },
    "label_longitude": {
        "en": "Longitude",
        "sv": "Longitud",
    },
    "label_hour": {
        "en": "Time",
        "sv": "Klockslag",
    },
    "toggle_dark": {
        "en": "Dark mode",
        "sv": "Mörkt läge",
    },
    "toggle_today": {
        "en": "Today's sun path",
        "sv": "Dagens solbana",
    },
    "toggle_below": {
        "en": "Show below horizon",
        "sv": "Visa under horisonten",
    },
    "info_title": {
        "en": "About the Sun's Position",
        "sv": "Om solens position",
    },
    "info_body": {
        "en": "The graph shows the sun's position in the sky for each hour throughout the year. "
        "Click on a curve to highlight that hour. The altitude (y-axis) shows how high the sun "
        "is in the sky, and the azimuth (x-axis) shows the direction of the sun.",
        "sv": "Diagrammet visar solens position på himlen för varje timme under året. "
        "Klicka på en kurva för att markera den timmen. Höjden (y-axeln) visar hur högt solen "
        "står och azimuten (x-axeln) visar i vilket väderstreck den syns.",
    },
    "error_location": {
        "en": "Invalid location or time: {error}",
        "sv": "Ogiltig plats eller tid: {error}",
    },
    "location_display": {
        "en": "{lat:.4f}°N, {lng:.4f}°E",
        "sv": "{lat:.4f}°N, {lng:.4f}°Ö",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
