"Observers which get notified about the progress of a search"

from .abstract import SearchObserver
from .simple_observer import SimpleObserver, Expansion, AttemptedSearch
