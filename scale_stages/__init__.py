"""scale-stages - ratio-preserving scale layouts, smoothed animation and an ordering puzzle."""

from scale_stages.animation import AnimatedEntity, AnimationController, make_animation_system
from scale_stages.camera import CameraState, CameraTarget, ViewController, frame_target, project
from scale_stages.catalog import DEFAULT_STAGES, Stage, StageCatalog, default_catalog
from scale_stages.config import ScaleConfig
from scale_stages.layout import INTRO_INDEX, Layout, LayoutEntry, compute_layout
from scale_stages.loop import Clock, TickLoop
from scale_stages.navigation import StageNavigator
from scale_stages.puzzle import PLACED, UNPLACED, OrderingPuzzle, PuzzleItem, PuzzlePhase
from scale_stages.scene import BodyView, CameraView, RenderFrame, ScaleScene
from scale_stages.signals import PUZZLE_COMPLETE, STAGE_CHANGED, SignalBus
from scale_stages.types import CatalogError, ConfigError, TickContext, Vec3

__all__ = [
    "ScaleScene",
    "RenderFrame",
    "BodyView",
    "CameraView",
    "Stage",
    "StageCatalog",
    "DEFAULT_STAGES",
    "default_catalog",
    "ScaleConfig",
    "Layout",
    "LayoutEntry",
    "INTRO_INDEX",
    "compute_layout",
    "AnimatedEntity",
    "AnimationController",
    "make_animation_system",
    "CameraState",
    "CameraTarget",
    "ViewController",
    "frame_target",
    "project",
    "StageNavigator",
    "OrderingPuzzle",
    "PuzzleItem",
    "PuzzlePhase",
    "PLACED",
    "UNPLACED",
    "SignalBus",
    "PUZZLE_COMPLETE",
    "STAGE_CHANGED",
    "Clock",
    "TickLoop",
    "TickContext",
    "Vec3",
    "CatalogError",
    "ConfigError",
]
