"""
Defines the store at the top level, and the lenses used to read and
update it.
"""
from dataclasses import dataclass
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from fieldlens import Action, Lens, lens, compose


class Profile(BaseModel):
    """
    Public profile of a user.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    age: int = Field(ge=0)
    country: str


class User(NamedTuple):
    """
    User record
    """
    id: int
    profile: Profile


@dataclass(frozen=True)
class Store:
    """
    Application top-level state.
    """
    user: User


def initial_store() -> Store:
    """
    Store the application starts from.
    """
    return Store(
        user=User(
            id=0,
            profile=Profile(name="initial user name", age=0,
                            country="anywhere")
        )
    )


type StoreAction = Action[Store]


store_user: Lens[Store, User] = lens(Store, "user")
user_profile: Lens[User, Profile] = lens(User, "profile")
profile_name: Lens[Profile, str] = lens(Profile, "name")

store_user_profile: Lens[Store, Profile] = compose(store_user, user_profile)
store_user_profile_name: Lens[Store, str] = \
    compose(store_user_profile, profile_name)
