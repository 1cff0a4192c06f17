"""User profile model.

The profile holds the form fields that are remembered between sessions so
the form can be pre-filled: the user's name, national ID and usual working
hours.
"""

from pydantic import Field

from kilometraje.models.base import BaseDataModel


class UserProfile(BaseDataModel):
    """Convenience fields persisted to pre-fill the expense form.

    All fields are kept as the raw strings the user typed; validation is
    done by the form, not here.

    Attributes:
        name: User's full name
        national_id: DNI/NIE as typed (normalized to uppercase by the form)
        start_time: Usual start time, ``HH:MM``
        end_time: Usual end time, ``HH:MM``
    """

    name: str = Field("", description="User's name")
    national_id: str = Field("", description="DNI or NIE")
    start_time: str = Field("", description="Start time (HH:MM)")
    end_time: str = Field("", description="End time (HH:MM)")
