"""Remove the stale label when someone comments on an item."""
import gidgethub.routing

from . import util

router = gidgethub.routing.Router()

# Maintainers often apply the stale label in the same comment that explains
# why, so their comments leave the label alone.
PRIVILEGED_ASSOCIATIONS = frozenset({"OWNER", "COLLABORATOR"})


class EventShapeError(Exception):
    """The event payload doesn't name the item that was commented on."""


def item_number(event_data):
    for key in ("issue", "pull_request"):
        number = (event_data.get(key) or {}).get("number")
        if number:
            return number
    raise EventShapeError("Could not determine issue number from event")


@router.register("issue_comment", action="created")
@router.register("pull_request_review_comment", action="created")
async def remove_stale_label(event, gh, *args, options, repository, **kwargs):
    """Treat a comment from anyone but a maintainer as a sign of life."""
    number = item_number(event.data)
    association = (event.data.get("comment") or {}).get("author_association", "NONE")
    if association in PRIVILEGED_ASSOCIATIONS:
        util.info(f"Not removing label, comment is from {association.lower()}")
        return
    label = options.issue_label
    if await util.remove_label(gh, repository, number, label):
        util.info(f"Removed the {label} on #{number} due to comment activity")
