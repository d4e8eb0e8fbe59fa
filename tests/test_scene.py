# File: tests/test_scene.py
"""
Test the Plotly scene and the static snapshot.

Checks what gets drawn (one mesh per resolvable member / support), what is
skipped silently (missing nodes), and the camera / controls setup.
"""

import math

import numpy as np
import plotly.graph_objects as go
import pytest

from mount_stick.model import Member, Node, StickModel, Support
from mount_stick.scene import SceneSettings, build_scene, camera_eye, plot_model_3d
from mount_stick.snapshot import save_snapshot


def make_portal():
    """
    Simple portal frame: two columns and a beam, both feet supported.
    One extra member and one extra support reference undefined node 9.
    """
    nodes = {
        1: Node(1, 0.0, 0.0, 0.0),
        2: Node(2, 0.0, 0.0, 10.0),
        3: Node(3, 20.0, 0.0, 10.0),
        4: Node(4, 20.0, 0.0, 0.0),
    }
    members = [Member(1, 2), Member(2, 3), Member(3, 4), Member(4, 9)]
    supports = [Support(1, "Fixed"), Support(4, "Pinned"), Support(9, "Fixed")]
    return StickModel(nodes=nodes, members=members, supports=supports, source="portal")


def traces_in(fig, group):
    return [t for t in fig.data if t.legendgroup == group]


class TestBuildScene:

    def test_one_mesh_per_resolved_member_and_support(self):
        fig = build_scene(make_portal())

        members = traces_in(fig, "members")
        supports = traces_in(fig, "supports")
        assert len(members) == 3
        assert len(supports) == 2
        assert all(isinstance(t, go.Mesh3d) for t in members + supports)

    def test_legend_shows_each_group_once(self):
        fig = build_scene(make_portal())
        assert [t.showlegend for t in traces_in(fig, "members")] == [True, False, False]
        assert [t.showlegend for t in traces_in(fig, "supports")] == [True, False]

    def test_default_colours(self):
        fig = build_scene(make_portal())
        assert traces_in(fig, "members")[0].color == "yellow"
        assert traces_in(fig, "supports")[0].color == "red"
        assert fig.layout.paper_bgcolor == "black"

    def test_member_mesh_spans_its_nodes(self):
        fig = build_scene(make_portal(), SceneSettings(member_radius=0.5))
        column = traces_in(fig, "members")[0]
        assert min(column.z) == pytest.approx(0.0)
        assert max(column.z) == pytest.approx(10.0)
        assert max(abs(x) for x in column.x) == pytest.approx(0.5, abs=1e-9)

    def test_support_cube_size(self):
        fig = build_scene(make_portal(), SceneSettings(support_size=4.0))
        cube = traces_in(fig, "supports")[1]  # at node 4 = (20, 0, 0)
        assert min(cube.x) == pytest.approx(18.0)
        assert max(cube.x) == pytest.approx(22.0)

    def test_hover_text(self):
        fig = build_scene(make_portal())
        assert "1 → 2" in traces_in(fig, "members")[0].hovertext
        assert "Pinned" in traces_in(fig, "supports")[1].hovertext

    def test_lighting_from_settings(self):
        settings = SceneSettings(ambient_intensity=0.3, point_light_position=(1.0, 2.0, 3.0))
        mesh = traces_in(build_scene(make_portal(), settings), "members")[0]
        assert mesh.lighting.ambient == pytest.approx(0.3)
        assert (mesh.lightposition.x, mesh.lightposition.y, mesh.lightposition.z) == (1.0, 2.0, 3.0)

    def test_orbit_controls_and_perspective(self):
        scene = build_scene(make_portal()).layout.scene
        assert scene.dragmode == "orbit"
        assert scene.aspectmode == "data"
        assert scene.camera.projection.type == "perspective"

    def test_zero_length_member_is_skipped(self):
        model = StickModel(
            nodes={1: Node(1, 0, 0, 0), 2: Node(2, 0, 0, 0), 3: Node(3, 0, 0, 5)},
            members=[Member(1, 2), Member(1, 3)],
        )
        assert len(traces_in(build_scene(model), "members")) == 1

    def test_nan_node_is_skipped(self):
        model = StickModel(
            nodes={1: Node(1, 0, 0, 0), 2: Node(2, math.nan, 0, 0)},
            members=[Member(1, 2)],
            supports=[Support(2, "Fixed")],
        )
        fig = build_scene(model)
        assert traces_in(fig, "members") == []
        assert traces_in(fig, "supports") == []

    def test_node_markers_optional(self):
        assert not any(isinstance(t, go.Scatter3d) for t in build_scene(make_portal()).data)

        fig = build_scene(make_portal(), SceneSettings(show_nodes=True))
        markers = [t for t in fig.data if isinstance(t, go.Scatter3d)]
        assert len(markers) == 1
        assert len(markers[0].x) == 4

    def test_empty_model_gives_annotated_figure(self):
        fig = build_scene(StickModel())
        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == "No renderable members"

    def test_title(self):
        fig = build_scene(make_portal(), title="Portal")
        assert fig.layout.title.text == "Portal"


class TestCamera:

    def test_default_camera_looks_down_the_diagonal(self):
        eye = camera_eye(SceneSettings(), center=np.zeros(3))
        assert eye["x"] == pytest.approx(eye["y"])
        assert eye["y"] == pytest.approx(eye["z"])
        assert eye["x"] > 0

    def test_distance_follows_field_of_view(self):
        center = np.zeros(3)

        def dist(fov):
            e = camera_eye(SceneSettings(fov=fov), center)
            return math.sqrt(e["x"] ** 2 + e["y"] ** 2 + e["z"] ** 2)

        assert dist(60) == pytest.approx(1.25 / math.tan(math.radians(30)))
        assert dist(30) > dist(60) > dist(90)

    def test_camera_at_center_falls_back_to_diagonal(self):
        eye = camera_eye(SceneSettings(camera_position=(5.0, 5.0, 5.0)), np.array([5.0, 5.0, 5.0]))
        assert eye["x"] == pytest.approx(eye["z"])


class TestOutputs:

    def test_plot_model_3d_writes_html(self, tmp_path):
        out = tmp_path / "out" / "portal.html"
        fig = plot_model_3d(make_portal(), outpath=str(out), show=False)
        assert isinstance(fig, go.Figure)
        assert out.exists()
        assert "plotly" in out.read_text(encoding="utf-8").lower()

    def test_save_snapshot_writes_png(self, tmp_path):
        out = tmp_path / "portal.png"
        path = save_snapshot(make_portal(), str(out), SceneSettings(member_segments=8), dpi=50)
        assert path == str(out)
        assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_snapshot_of_empty_model(self, tmp_path):
        out = tmp_path / "empty.png"
        save_snapshot(StickModel(), str(out), dpi=50)
        assert out.exists()
