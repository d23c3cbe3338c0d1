from pathlib import PurePosixPath

from pydantic import BaseModel


class BuildSceneEntry(BaseModel):
    path: str
    enabled: bool = True


class SceneRecord(BaseModel):
    name: str
    path: str
    in_build_list: bool = False
    build_index: int = -1

    @classmethod
    def from_path(
        cls,
        path: str,
        build_scenes: list[BuildSceneEntry] | None = None,
    ) -> "SceneRecord":
        scene = cls(
            name=PurePosixPath(path).stem,
            path=path,
        )
        if build_scenes is not None:
            scene.update_build_info(build_scenes=build_scenes)

        return scene

    def update_build_info(self, build_scenes: list[BuildSceneEntry]) -> None:
        self.in_build_list = False
        self.build_index = -1

        for build_index, build_scene in enumerate(build_scenes):
            if build_scene.path == self.path:
                self.in_build_list = True
                self.build_index = build_index
                break
