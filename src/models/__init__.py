from .enums.ResponseEnums import ResponseSignal
