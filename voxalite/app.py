"""The demo game: a field of textured cubes lit by a circling point light."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .camera import Camera
from .errors import EngineError, info
from .events import Event, Key, KeyEvent, KeyState, MouseEvent, StopEvent
from .geometry import Mesh
from .graphics import Material, Sampler, Shader, ShaderType, Texture
from .renderer import Renderer
from .resources import ResourceLoader
from .scene import DirectionalLight, Entity, PointLight, Scene
from .vector3 import Color, Vector3
from .window import Window

SENSITIVITY = 0.01
SPEED = 0.03
LIGHT_STEP = 0.001
LIGHT_RADIUS = 10.0
WIDTH = 800
HEIGHT = 600


@dataclass
class InputState:
    """Which keys are held and whether the game should keep running."""

    keys: Dict[Key, bool] = field(default_factory=dict)
    running: bool = True

    def handle(self, event: Event, camera: Camera) -> None:
        """Apply one input event to the key state and the camera."""
        if isinstance(event, StopEvent):
            self.running = False
        elif isinstance(event, KeyEvent):
            if event.key is Key.ESC:
                self.running = False
            else:
                self.keys[event.key] = event.state is KeyState.DOWN
        elif isinstance(event, MouseEvent):
            camera.adjust_yaw(event.delta_x * SENSITIVITY)
            camera.adjust_pitch(-event.delta_y * SENSITIVITY)

    def walk_direction(self, camera: Camera) -> Vector3:
        """The unnormalised movement direction from the held W, A, S and D keys."""
        direction = Vector3(0.0, 0.0, 0.0)
        if self.keys.get(Key.W, False):
            direction = direction + camera.direction
        if self.keys.get(Key.S, False):
            direction = direction - camera.direction
        if self.keys.get(Key.A, False):
            direction = direction - camera.right()
        if self.keys.get(Key.D, False):
            direction = direction + camera.right()
        return direction


def build_entities(mesh: Any, material: Any, texture: Any, sampler: Any) -> List[Entity]:
    """A 20 by 20 grid of cubes spaced 2.5 apart on the plane y = -3."""
    return [
        Entity(mesh, material, Vector3(i * 2.5, -3.0, j * 2.5), texture, sampler)
        for i in range(-10, 10)
        for j in range(-10, 10)
    ]


def _run(assets: str) -> None:
    window = Window(WIDTH, HEIGHT)
    try:
        loader = ResourceLoader(assets)

        texture = Texture(loader.load_binary("wooden_crate.png"), 256, 256)
        sampler = Sampler()
        vertex_shader = Shader(loader.load_string("simple.vert"), ShaderType.VERTEX)
        fragment_shader = Shader(loader.load_string("simple.frag"), ShaderType.FRAGMENT)
        material = Material(vertex_shader, fragment_shader)
        mesh = Mesh()
        renderer = Renderer()

        scene = Scene(
            build_entities(mesh, material, texture, sampler),
            Color(0.1, 0.1, 0.1),
            DirectionalLight(Vector3(-1.1, -1.0, -1.0), Color(0.0, 0.0, 0.0)),
            PointLight(Vector3(0.0, 3.0, 0.0), Color(0.5, 0.5, 0.5)),
        )
        camera = Camera(
            Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0),
            math.pi / 4.0, float(WIDTH), float(HEIGHT), 0.1, 100.0,
        )

        state = InputState()
        t = 0.0
        while state.running:
            event = window.pump_event()
            while event is not None and state.running:
                state.handle(event, camera)
                event = window.pump_event()

            camera.translate(state.walk_direction(camera).normalized() * SPEED)

            t += LIGHT_STEP
            light = scene.point.position
            scene.point.position = Vector3(
                math.sin(t) * LIGHT_RADIUS, light.y, math.cos(t) * LIGHT_RADIUS
            )

            renderer.render(camera, scene)
            window.swap()
    finally:
        window.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until the window is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="voxalite", description="A simple voxel engine.")
    parser.add_argument("--assets", default="../assets/", help="directory holding the assets")
    args = parser.parse_args(argv)

    info("Initializing game")
    try:
        _run(args.assets)
    except EngineError as err:
        print(err, file=sys.stderr)
    except Exception:
        print("unknown error", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())