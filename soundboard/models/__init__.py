from soundboard.models.feedback import Feedback
from soundboard.models.history import History
from soundboard.models.profile import Profile
from soundboard.models.report import Report
from soundboard.models.soundboard import Soundboard

__all__ = ["Feedback", "History", "Profile", "Report", "Soundboard"]
