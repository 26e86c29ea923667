from enum import StrEnum

class MoveKind(StrEnum):
    ADD = "add"
    STEP = "step"
    QUIT = "quit"

class Direction(StrEnum):
    NORTH = "N"
    NORTHEAST = "NE"
    EAST = "E"
    SOUTHEAST = "SE"
    SOUTH = "S"
    SOUTHWEST = "SW"
    WEST = "W"
    NORTHWEST = "NW"
    NONE = "NONE"
