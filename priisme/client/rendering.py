from typing import Any, Iterable, List, Mapping, Optional
from pydantic import BaseModel

from priisme.utils.date_utils import format_display_date


class AttributeCard(BaseModel):
    label: str
    value: str

class ColorPaletteView(BaseModel):
    recommended: List[str] = []
    # None when there is nothing to avoid; the subsection is then omitted
    avoid: Optional[List[str]] = None

class ClothingGroupView(BaseModel):
    type: str
    suggestions: List[str] = []

class MakeupItemView(BaseModel):
    type: str
    suggestion: str

class StyleResultsView(BaseModel):
    summary: str = ""
    attributes: List[AttributeCard] = []
    palette: ColorPaletteView = ColorPaletteView()
    clothing: List[ClothingGroupView] = []
    hairstyles: List[str] = []
    makeup: List[MakeupItemView] = []

class HistoryItem(BaseModel):
    id: str
    label: str
    date: str
    full_analysis: Any = None


def _text(value: Any) -> str:
    return "" if value is None else str(value)

def _items(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []

def _texts(value: Any) -> List[str]:
    return [_text(item) for item in _items(value)]


def build_style_results(analysis: Optional[Mapping[str, Any]]) -> StyleResultsView:
    """
    Build the result view for one analysis.

    The analysis comes straight from the model, so nothing is assumed: missing
    strings become empty text and anything that is not a list becomes an
    empty list.
    """
    if not isinstance(analysis, Mapping):
        analysis = {}

    skin_tone = _text(analysis.get("skin_tone"))
    undertone = analysis.get("skin_undertone")
    if undertone:
        skin_tone = f"{skin_tone} ({undertone})"

    avoid = _texts(analysis.get("avoid_colors"))

    return StyleResultsView(
        summary=_text(analysis.get("overall_summary")),
        attributes=[
            AttributeCard(label="Face Shape", value=_text(analysis.get("face_shape"))),
            AttributeCard(label="Skin Tone", value=skin_tone),
            AttributeCard(label="Body Type", value=_text(analysis.get("body_type"))),
            AttributeCard(label="Style Personality", value=_text(analysis.get("style_personality"))),
        ],
        palette=ColorPaletteView(
            recommended=_texts(analysis.get("recommended_colors")),
            avoid=avoid or None
        ),
        clothing=[
            ClothingGroupView(type=_text(rec.get("type")), suggestions=_texts(rec.get("suggestions")))
            for rec in _items(analysis.get("clothing_recommendations"))
            if isinstance(rec, Mapping)
        ],
        hairstyles=_texts(analysis.get("hairstyle_recommendations")),
        makeup=[
            MakeupItemView(type=_text(rec.get("type")), suggestion=_text(rec.get("suggestion")))
            for rec in _items(analysis.get("makeup_recommendations"))
            if isinstance(rec, Mapping)
        ],
    )


def build_history_items(records: Iterable[Mapping[str, Any]], limit: int = 3) -> List[HistoryItem]:
    """Entries for the "Previous Analyses" list on the upload view"""
    items = []
    for record in list(records)[:limit]:
        items.append(HistoryItem(
            id=_text(record.get("id")),
            label=f"{_text(record.get('style_personality')).capitalize()} Style",
            date=format_display_date(record.get("created_at")),
            full_analysis=record.get("full_analysis")
        ))
    return items


def render_text(view: StyleResultsView) -> str:
    """Plain-text rendering used by the command line"""
    lines = ["Your Style Profile", view.summary, ""]

    for card in view.attributes:
        lines.append(f"{card.label}: {card.value}")

    lines.extend(["", "Your Color Palette"])
    lines.append("  Recommended Colors: " + ", ".join(view.palette.recommended))
    if view.palette.avoid:
        lines.append("  Colors to Avoid: " + ", ".join(view.palette.avoid))

    lines.extend(["", "Clothing Recommendations"])
    for group in view.clothing:
        lines.append(f"  {group.type.capitalize()}")
        lines.extend(f"    - {suggestion}" for suggestion in group.suggestions)

    lines.extend(["", "Hairstyle Recommendations"])
    lines.extend(f"  - {style}" for style in view.hairstyles)

    lines.extend(["", "Makeup Recommendations"])
    for item in view.makeup:
        lines.append(f"  {item.type.capitalize()}: {item.suggestion}")

    return "\n".join(lines)
