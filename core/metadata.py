"""
HealthInfoBot Core Metadata
---------------------------
Project identity shared by the API root endpoint and the health report.
"""

__project__ = "HealthInfoBot"
__version__ = "1.0.0"

CORE_METADATA = {
    "project": __project__,
    "version": __version__,
    "description": (
        "Disease information catalog with CRUD access and a keyword "
        "chatbot that answers questions about symptoms, causes, "
        "prevention and when to see a doctor."
    ),
}


def get_metadata() -> dict:
    """Return current system metadata as a dict."""
    return dict(CORE_METADATA)
