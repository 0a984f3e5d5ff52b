import math
import pytest
import ezdxf
from mathcanvas.curve import FunctionDescriptor, Variant
from mathcanvas.drawable import Drawable
from mathcanvas.ezdxf_drawable import ezdxfDraw
from mathcanvas.frame import CoordinateFrame
from mathcanvas.geom import ScreenPoint
from mathcanvas.shapes import Rect, Circle, Segment
from mathcanvas.world import World
from mathcanvas.__main__ import build_demo, main
from mathcanvas.config import ViewConfig
## unit tests for the drawable back ends and the command line

def make_world():
    w = World(CoordinateFrame(640, 480, scale=20))
    w.add_graph(math.sin, color='aqua', fills={'below': 'navy'})
    w.add_sprite(Circle(100, 100, 10), color='red')
    w.add_sprite(Rect(200, 200, 20, 10), color='yellow', filled=False)
    return w


class TestDrawable:
    def test_colors(self):
        d = Drawable()
        assert d.thing2color('red') == [255, 0, 0]
        assert d.thing2color('red', 'i') == 1
        assert d.thing2color('navy', 'f') == [0.0, 0.0, 128 / 255.0]
        assert d.thing2color([1.0, 1.0, 1.0], 'i') == 7
        assert d.thing2color(3) == [0, 255, 0]
        with pytest.raises(ValueError):
            d.thing2color('chartreuse-ish')
        with pytest.raises(ValueError):
            d.thing2color(300)

    def test_properties(self):
        d = Drawable()
        d.linecolor = 'Aqua'
        d.fillcolor = [10, 20, 30]
        d.linewidth = 0
        assert d.linewidth > 0
        with pytest.raises(ValueError):
            d.linecolor = 'nocolor'
        with pytest.raises(ValueError):
            d.layer = 'nolayer'

    def test_draw_dispatch(self):
        d = Drawable()
        d.draw([Rect(0, 0, 1, 1), Circle(0, 0, 1), Segment((0, 0), (1, 1)),
                ScreenPoint(3, 3)])
        with pytest.raises(ValueError):
            d.draw('sine')


class TestEzdxf:
    def test_write(self, tmp_path):
        w = make_world()
        dd = ezdxfDraw(w.frame)
        dd.filename = str(tmp_path / 'scene')
        dd.draw_axes()
        w.render(dd)
        dd.display()

        doc = ezdxf.readfile(str(tmp_path / 'scene.dxf'))
        msp = doc.modelspace()
        curves = msp.query('LWPOLYLINE[layer=="CURVES"]')
        assert len(curves) == 1
        assert len(msp.query('HATCH[layer=="FILLS"]')) == 1
        assert len(msp.query('CIRCLE[layer=="SPRITES"]')) == 1
        assert len(msp.query('LWPOLYLINE[layer=="SPRITES"]')) == 1
        assert len(msp.query('LINE[layer=="AXES"]')) > 2

    def test_y_flipped(self):
        f = CoordinateFrame(640, 480, scale=20)
        dd = ezdxfDraw(f)
        dd.draw_line(ScreenPoint(0, 0), ScreenPoint(10, 480))
        line = dd.modelspace.query('LINE')[0]
        assert tuple(line.dxf.start)[:2] == (0, 480)
        assert tuple(line.dxf.end)[:2] == (10, 0)

    def test_text(self):
        dd = ezdxfDraw(CoordinateFrame(640, 480, scale=20))
        dd.draw_text('origin', ScreenPoint(320, 240))
        dd.draw_text('big', ScreenPoint(0, 0), attr={'height': 30})
        heights = [t.dxf.height for t in dd.modelspace.query('TEXT')]
        assert heights == [12, 30]

    def test_filename(self):
        dd = ezdxfDraw()
        assert dd.filename == 'mathcanvas-out'
        with pytest.raises(ValueError):
            dd.filename = 7


class TestPyglet:
    def test_record(self):
        pytest.importorskip('pyglet')
        from mathcanvas.pyglet_drawable import pygletDraw
        w = make_world()
        pd = pygletDraw(w)
        w.render(pd)
        assert pd.triangles
        assert all(color == (0, 0, 128) for tri, color in pd.triangles)
        assert len(pd.circles) == 1
        p, r, color, fill = pd.circles[0]
        assert (r, color, fill) == (10, (255, 0, 0), (255, 0, 0))
        ## sine polyline plus the four sides of the rectangle
        assert len(pd.lines) == len(w.graphs[0].curve.subpaths[0]) - 1 + 4
        pd.clear()
        assert pd.lines == [] and pd.triangles == []

    def test_text(self):
        pytest.importorskip('pyglet')
        from mathcanvas.pyglet_drawable import pygletDraw
        pd = pygletDraw(make_world())
        pd.draw_text('a', ScreenPoint(1, 2))
        pd.draw_text('b', ScreenPoint(3, 4), attr={'size': 20})
        assert pd.labels == [('a', ScreenPoint(1, 2), 12, (255, 255, 255)),
                             ('b', ScreenPoint(3, 4), 20, (255, 255, 255))]

    def test_region_triangles(self):
        pytest.importorskip('pyglet')
        from mathcanvas.pyglet_drawable import region_triangles
        curve = [ScreenPoint(0, 10), ScreenPoint(10, 20), ScreenPoint(20, 10)]
        ring = curve + [ScreenPoint(20, 481), ScreenPoint(0, 481)]
        tris, holes = region_triangles('below', [ring], ScreenPoint(320, 240))
        assert len(tris) == 4
        assert holes == []
        square = [ScreenPoint(0, 0), ScreenPoint(4, 0), ScreenPoint(4, 4), ScreenPoint(0, 4)]
        tris, holes = region_triangles('outside', [square, curve], ScreenPoint(2, 2))
        assert len(tris) == 2
        assert len(holes) == 3

    def test_zoom_about_mouse(self):
        pytest.importorskip('pyglet')
        from mathcanvas.pyglet_drawable import pygletDraw, ZOOM_STEP
        w = make_world()
        pd = pygletDraw(w)
        pd.mouse = ScreenPoint(100, 100)
        pd.zoom_about_mouse(True)
        assert w.frame.zoom_level == 1.0 / ZOOM_STEP
        pd.zoom_about_mouse(False)
        assert w.frame.zoom_level == pytest.approx(1.0)


class TestCommandLine:
    def test_demo(self):
        w = build_demo(ViewConfig())
        assert len(w.graphs) == 5
        assert {g.variant for g in w.graphs} == set(Variant)
        for i in range(10):
            w.tick()
        assert w.frame_count == 10
        assert len(w.sprites) == 2

    def test_dxf(self, tmp_path):
        cfg = tmp_path / 'view.yaml'
        cfg.write_text('width: 320\nheight: 240\nscale: 10\n')
        out = tmp_path / 'out'
        assert main(['-c', str(cfg), 'dxf', str(out), '-t', '3']) == 0
        doc = ezdxf.readfile(str(out) + '.dxf')
        assert len(doc.modelspace().query('LWPOLYLINE[layer=="CURVES"]')) > 0

    def test_bad_config(self, tmp_path):
        with pytest.raises(SystemExit):
            main(['-c', str(tmp_path / 'missing.yaml'), 'dxf'])
        with pytest.raises(SystemExit):
            main(['-c', str(tmp_path), 'dxf'])
