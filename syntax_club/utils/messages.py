"""Message mappings for API responses."""


class Messages:
    """Centralized messages for API responses."""

    # General CRUD messages
    CRUD = {
        "created": "Data created successfully",
        "updated": "Data updated successfully",
        "deleted": "Data deleted successfully",
        "not_found": "Data not found",
        "already_exists": "Data already exists",
        "operation_failed": "Operation failed",
    }

    # Member messages
    MEMBER = {
        "not_found": "Member not found",
        "not_found_with_id": "Member {member_id} not found",
        "deleted": "Member deleted successfully",
        "banned": "Member {member_id} has been banned",
        "unbanned": "Member {member_id} has been unbanned",
        "already_banned": "Member {member_id} is already banned",
        "not_banned": "Member {member_id} is not banned",
    }

    # Fest messages
    FEST = {
        "not_found": "Fest with identifier '{identifier}' not found.",
        "year_exists": "A fest for the year {year} already exists.",
        "invalid_dates": "End date cannot be before the start date.",
        "deleted": "Fest deleted successfully",
        "no_export_data": "No fest data to export.",
        "no_landing_data": "No active or past fest data available.",
    }

    # Event messages
    EVENT = {
        "not_found": "Event not found",
        "not_found_with_id": "Event {event_id} not found",
        "deleted": "Event deleted successfully",
        "invalid_registration_window": "Registration cannot close before it opens.",
    }

    # Fest sub-resource messages
    FEST_ITEM = {
        "not_found": "{kind} item '{item_id}' not found.",
        "removed": "{kind} item removed successfully",
        "invalid_order": "Reorder list must contain each existing {kind} id exactly once.",
        "partner_not_found": "Partner '{name}' not found.",
        "partner_exists": "Partner '{name}' already exists on this fest.",
        "event_linked": "This event is already linked to the fest.",
        "event_not_linked": "Event '{event_id}' is not linked to this fest.",
        "partner_removed": "Partner removed successfully",
    }

    # Validation messages
    VALIDATION = {
        "required_field": "Field {field} is required",
        "invalid_direction": "Direction must be 'up' or 'down'",
    }


def get_message(category: str, key: str, **kwargs) -> str:
    """Get a message from the specified category and format it with kwargs."""
    category_messages = getattr(Messages, category.upper(), {})
    message = category_messages.get(key, f"Message not found: {category}.{key}")
    return message.format(**kwargs) if kwargs else message
