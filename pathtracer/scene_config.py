"""Settings for one render, as read from the configuration files."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional

from pathtracer.scene_objects import SceneObjects
from pathtracer.vectors import Vec

FILE_NAME_DEFAULT = "SCENECONFIG_INDICATES_FILENAME_RANDOMISED"


@dataclass
class SceneConfig:
    """Everything needed to set up the camera, the scene and the output."""

    window_title: str = ""

    num_threads: Optional[int] = None
    num_rays: int = 0
    num_bounces: int = 0
    contribution_per_bounce: float = 0.0

    width: int = 0
    height: int = 0
    field_of_view: int = 0

    aspect_ratio: float = 0.0
    horizontal_rotation: float = 0.0
    vertical_rotation: float = 0.0
    camera_rotation: float = 0.0
    camera_position: Vec = (0.0, 0.0, 0.0)

    scene_setup: SceneObjects = field(default_factory=SceneObjects)
    scene_seed: Optional[int] = None

    print_percent_status_every: int = 0

    store_result_to_file: bool = False
    file_name: str = FILE_NAME_DEFAULT

    display_result_on_screen: bool = False

    def describe(self) -> str:
        """The setup summary as printed before rendering."""
        x, y, z = self.camera_position
        lines = [
            f"//====| {self.window_title} Setup |=====//",
            "\n<======> Screen Config <======>",
            f"<-=| Screen Width  => {self.width}",
            f"<-=| Aspect Ratio  => {self.aspect_ratio:g}",
            "\n<======> Simulation Config <======>",
            f"<-=| Number of Threads         => {self.num_threads}",
            f"<-=| Number of Rays Per Pixel  => {self.num_rays}",
            f"<-=| Number of Bounces Per Ray => {self.num_bounces}",
        ]
        if self.scene_seed is not None:
            lines.append(f"<-=| Random Seed => {self.scene_seed}")
        lines += [
            "\n<======> Camera Config <======>",
            f"<-=| Field Of View => {self.field_of_view}",
            f"<-=| Horizontal Rotation (rad) => {self.horizontal_rotation:g}",
            f"<-=| Vertical Rotation   (rad) => {self.vertical_rotation:g}",
            f"<-=| Camera Rotation     (rad) => {self.camera_rotation:g}",
            f"<-=| Camera Position => [{x:g}, {y:g}, {z:g}]",
            "\n<======> Objects Config <======>",
            f"<-=| Number of shapes   => {len(self.scene_setup.shapes)}",
            "\n<======> Misc Config <======>",
            "<-=| Print Percentage Progress Every => "
            f"{self.print_percent_status_every}%",
        ]
        if self.store_result_to_file:
            lines.append("<-=| Store Scene to PNG File => True")
            lines.append(f"<-=| File Name => {self.file_name}.bmp")
        else:
            lines.append("<-=| Store Scene to PNG File => False")
        lines.append("\n")
        return "".join(line + "\n" for line in lines)

    def display(self) -> str:
        """Write the setup summary to standard output and return it."""
        text = self.describe()
        sys.stdout.write(text)
        sys.stdout.flush()
        return text