"""Style and theme utilities"""
from schedule_viewer.config import config


# Color scheme
COLORS = {
    "primary": "#1f77b4",
    "muted": "#7f7f7f",
}

# Subject badge colors
SUBJECT_COLORS = {
    "math": "#1f77b4",        # Blue
    "science": "#2ca02c",     # Green
    "english": "#9467bd",     # Purple
    "history": "#8c564b",     # Brown
    "art": "#e377c2",         # Pink
    "music": "#ff7f0e",       # Orange
    "pe": "#d62728",          # Red
    "language": "#17becf",    # Teal
}


CARD_CSS = """
<style>
.schedule-card { background: rgba(255,255,255,0.06); border: 1px solid rgba(0,0,0,0.08); border-radius: 10px;
                 padding: 12px; margin: 8px 0; opacity: 0; animation: card-in 0.4s ease forwards; }
.period-badge { display: inline-block; min-width: 2em; padding: 2px 8px; border-radius: 12px;
                background: %(primary)s; color: white; font-weight: 700; text-align: center; }
.class-name { font-size: 1.1rem; font-weight: 600; margin: 6px 0 2px 0; }
.class-info { font-size: 0.9rem; opacity: 0.85; }
.subject-badge { display: inline-block; margin-top: 6px; padding: 2px 8px; border-radius: 3px;
                 color: white; font-size: 0.8em; }
@keyframes card-in { from { opacity: 0; transform: translateY(8px); } to { opacity: 1; transform: none; } }
</style>
""" % COLORS


def get_subject_color(subject_area) -> str:
    """Get badge color for a subject area.

    Unknown or missing subjects get the muted color.
    """
    if not isinstance(subject_area, str):
        return COLORS["muted"]
    return SUBJECT_COLORS.get(subject_area.strip().lower(), COLORS["muted"])


def stagger_delay(index: int, step: float = None) -> float:
    """Animation delay for the card at a given position.

    Presentation only; it never affects ordering or content.

    Args:
        index: Zero-based card position
        step: Seconds between consecutive cards (defaults to config)

    Returns:
        Delay in seconds
    """
    step = config.STAGGER_STEP_SECONDS if step is None else step
    return round(index * step, 3)
