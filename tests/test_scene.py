import pytest

from gameengine.scene import AbstractSceneFactory, BaseScene, SceneManager


class RecordingScene(BaseScene):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def initialize(self):
        self.log.append((self.name, "initialize"))

    def finalize(self):
        self.log.append((self.name, "finalize"))

    def update(self):
        self.log.append((self.name, "update"))

    def draw(self):
        self.log.append((self.name, "draw"))


class Factory(AbstractSceneFactory):
    def __init__(self, log):
        self.log = log

    def create_scene(self, scene_name):
        return RecordingScene(scene_name, self.log)


def test_base_scene_is_abstract():
    with pytest.raises(TypeError):
        BaseScene()


def test_attach_sets_manager():
    log = []
    scene = RecordingScene("a", log)
    manager = SceneManager()
    scene.attach(manager)
    assert scene.scene_manager is manager


def test_first_update_initializes_and_updates():
    log = []
    manager = SceneManager()
    scene = RecordingScene("title", log)
    manager.schedule(scene)
    manager.update()
    assert log == [("title", "initialize"), ("title", "update")]
    assert scene.scene_manager is manager


def test_change_scene_finalizes_old_scene():
    log = []
    manager = SceneManager(Factory(log))
    manager.change_scene("title")
    manager.update()
    manager.change_scene("game")
    manager.update()
    manager.draw()
    assert log == [
        ("title", "initialize"),
        ("title", "update"),
        ("title", "finalize"),
        ("game", "initialize"),
        ("game", "update"),
        ("game", "draw"),
    ]


def test_change_scene_without_factory_raises():
    with pytest.raises(RuntimeError):
        SceneManager().change_scene("title")


def test_change_scene_while_pending_raises():
    manager = SceneManager(Factory([]))
    manager.change_scene("title")
    with pytest.raises(RuntimeError):
        manager.change_scene("game")


def test_update_without_scene_raises():
    with pytest.raises(RuntimeError):
        SceneManager().update()
    with pytest.raises(RuntimeError):
        SceneManager().draw()


def test_finalize_finalizes_active_scene():
    log = []
    manager = SceneManager(Factory(log))
    manager.change_scene("title")
    manager.update()
    manager.finalize()
    assert log[-1] == ("title", "finalize")
    with pytest.raises(RuntimeError):
        manager.draw()