from medal_table.services.medal_service import MedalService


def get_medal_service() -> MedalService:
    """Provide a MedalService bound to the configured dataset."""
    return MedalService()
