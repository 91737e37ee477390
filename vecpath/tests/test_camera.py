import unittest

from vecpath.viewer_desktop.camera import Camera2D
from vecpath.viewer_desktop.input import InputState


class Camera2DTests(unittest.TestCase):
    def test_origin_maps_to_screen_center(self) -> None:
        camera = Camera2D(width=200, height=100)
        self.assertEqual(camera.world_to_screen((0.0, 0.0)), (100.0, 50.0))

    def test_world_y_points_up(self) -> None:
        camera = Camera2D(width=200, height=100, pixels_per_unit=2.0)
        x, y = camera.world_to_screen((10.0, 10.0))
        self.assertEqual((x, y), (120.0, 30.0))

    def test_screen_to_world_inverts_world_to_screen(self) -> None:
        camera = Camera2D(width=640, height=480, zoom=1.7, center=(12.0, -3.0))
        screen = camera.world_to_screen((25.0, 40.0))
        world = camera.screen_to_world(*screen)
        self.assertAlmostEqual(world[0], 25.0)
        self.assertAlmostEqual(world[1], 40.0)

    def test_pan_moves_center_opposite_to_drag(self) -> None:
        camera = Camera2D(width=200, height=100, pixels_per_unit=2.0)
        camera.pan(20.0, 10.0)
        self.assertAlmostEqual(camera.center[0], -10.0)
        self.assertAlmostEqual(camera.center[1], 5.0)

    def test_zoom_keeps_anchor_fixed(self) -> None:
        camera = Camera2D(width=200, height=100)
        anchor = (150.0, 20.0)
        before = camera.screen_to_world(*anchor)
        camera.zoom_at(1.1, anchor)
        after = camera.screen_to_world(*anchor)
        self.assertAlmostEqual(camera.zoom, 1.1)
        self.assertAlmostEqual(before[0], after[0])
        self.assertAlmostEqual(before[1], after[1])

    def test_zoom_is_clamped(self) -> None:
        camera = Camera2D(width=200, height=100, zoom=40.0)
        camera.zoom_at(10.0, (0.0, 0.0))
        self.assertEqual(camera.zoom, 50.0)


class InputStateTests(unittest.TestCase):
    def setUp(self) -> None:
        self.camera = Camera2D(width=200, height=100, pixels_per_unit=1.0)
        self.input_state = InputState(self.camera)

    def test_drag_commits_segment_in_world_units(self) -> None:
        self.input_state.start_segment(100.0, 50.0)
        self.input_state.drag_segment(120.0, 50.0)
        self.assertEqual(self.input_state.sketch, ((0.0, 0.0), (20.0, 0.0)))
        segment = self.input_state.finish_segment(130.0, 40.0)
        self.assertEqual(segment, ((0.0, 0.0), (30.0, 10.0)))
        self.assertEqual(self.input_state.segments, [segment])
        self.assertIsNone(self.input_state.sketch)

    def test_click_without_drag_commits_nothing(self) -> None:
        self.input_state.start_segment(10.0, 10.0)
        self.assertIsNone(self.input_state.finish_segment(10.0, 10.0))
        self.assertEqual(self.input_state.segments, [])

    def test_finish_without_start_is_ignored(self) -> None:
        self.assertIsNone(self.input_state.finish_segment(5.0, 5.0))

    def test_clear(self) -> None:
        self.input_state.start_segment(0.0, 0.0)
        self.input_state.finish_segment(10.0, 0.0)
        self.input_state.clear()
        self.assertEqual(self.input_state.segments, [])

    def test_pan_only_while_panning(self) -> None:
        self.input_state.pan_to(50.0, 50.0)
        self.assertEqual(self.camera.center, (0.0, 0.0))
        self.input_state.start_pan(0.0, 0.0)
        self.input_state.pan_to(10.0, 0.0)
        self.input_state.end_pan()
        self.assertAlmostEqual(self.camera.center[0], -10.0)


if __name__ == "__main__":
    unittest.main()
