# Munsell Color - Munsell notation arithmetic and matching for Python
from .MunsellSpace import MunsellSpace
from .MunsellTable import MunsellTable
from .Utils.CustomTypes import *
from .Utils.Errors import MunsellError, FormatError, OutOfGamutError, NotInTableError, MunsellBatchError
from .Utils.IO import BuildRenotationTable, LoadMunsellTable, SaveMunsellTable
from .ColorMath.Notation import ParseMunsell, FormatMunsell
