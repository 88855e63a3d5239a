from typing import Annotated

from pydantic import Field

from tracker.validation import ACTOR_ID_MAX_LENGTH

# owner / assignee / acting-user identifier, bounded by its column width
ActorId = Annotated[str, Field(max_length=ACTOR_ID_MAX_LENGTH)]
