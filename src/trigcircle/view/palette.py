"""Colors per scene role."""
from trigcircle.controller.scene import Role

BACKGROUND = "k"

GREY = (128, 128, 128)
LIGHT_GREY = (211, 211, 211)
WHITE = (255, 255, 255)

ROLE_COLORS: dict[Role, tuple[int, int, int]] = {
    Role.AXIS: GREY,
    Role.UNIT_CIRCLE: GREY,
    Role.RADIUS: GREY,
    Role.RADIUS_LABEL: LIGHT_GREY,
    Role.THETA: WHITE,
    Role.NODE: WHITE,
    Role.RATE: GREY,
    Role.SIN: (255, 0, 0),
    Role.COS: (0, 255, 0),
    Role.TAN: (255, 255, 0),
    Role.COT: (255, 128, 0),
    Role.SEC: (255, 0, 255),
    Role.CSC: (0, 255, 255),
}
