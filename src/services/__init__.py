from .SymptomService import SymptomService
from .FacilityService import FacilityService
from .SessionService import SessionService
from .AuthService import AuthService, AuthError
