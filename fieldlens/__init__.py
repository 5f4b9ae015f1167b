""" imports for fieldlens """
from .actions import Action, set_, over, reducer, combine_actions, replay
from .errors import LensError, UnknownFieldError, UnsupportedRecordError
from .lens import Lens, lens, compose, identity, path, lens_path, lenses_for
from .monoid import Monoid, mconcat
from .records import field_names, replace_field
