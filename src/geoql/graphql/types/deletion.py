"""
Result types for delete mutations
"""

import strawberry


@strawberry.type(description="Confirmation that a record has been removed")
class DeletedConfirmation:
    id: int
    message: str
    cascaded_ids: list[int] = strawberry.field(
        default_factory=list,
        description="Ids of cities removed along with a deleted country",
    )
