from .registry import (
    Scene,
    get_scene,
    reset_scene,
)
from .factory import (
    GraphFactory,
    ColorGraphFactory,
    MonochromeGraphFactory,
)
from .facade import (
    ARITY,
    Instruction,
    InstructionError,
    FacadeConfig,
    BuildResult,
    GraphicsFacade,
    parse_instruction,
    build_scene_from_string,
)


