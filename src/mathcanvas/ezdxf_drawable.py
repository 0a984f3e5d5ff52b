## simple mathcanvas framework for dxf-rendered drawings using the
## ezdxf package.
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2026 mathcanvas contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import mathcanvas.drawable as drawable
import ezdxf
from ezdxf.enums import TextEntityAlignment

## class to provide dxf drawing functionality.  DXF y grows upward, so
## screen points are flipped about the frame height on the way out.
class ezdxfDraw(drawable.Drawable):

    def __init__(self, frame=None):
        super().__init__()

        # setup=False avoids creating default blocks (like _CLOSEDFILLED) that
        # contain SOLID entities unsupported by some CAD programs (e.g., FreeCAD)
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.layers.new('CURVES', dxfattribs={'color': 7}) #white
        self.__doc.layers.new('FILLS', dxfattribs={'color': 8}) #gray
        self.__doc.layers.new('SPRITES', dxfattribs={'color': 4}) #aqua
        self.__doc.layers.new('AXES', dxfattribs={'color': 2}) #yellow
        self.__msp = self.__doc.modelspace()
        self.__filename = "mathcanvas-out"
        self.layerlist = [False, '0', 'CURVES', 'FILLS', 'SPRITES', 'AXES']
        self.frame = frame

    def __repr__(self):
        return 'an instance of ezdxfDraw'

    ## properties

    @property
    def doc(self):
        return self.__doc

    @property
    def modelspace(self):
        return self.__msp

    @property
    def filename(self):
        return self.__filename

    def _set_filename(self, name):
        self.__filename = name

    @filename.setter
    def filename(self, name):
        if not isinstance(name, str):
            raise ValueError('bad (non-string) filename: ' + str(name))
        self._set_filename(name)

    ## helpers

    def _xy(self, p):
        h = self.frame.height if self.frame is not None else 0.0
        return (p.x, h - p.y)

    def _attribs(self, color=None):
        layer = self.layer
        if layer == False:
            layer = '0'
        if color is None:
            color = self.linecolor
        if color is not False:
            color = self.thing2color(color, 'i')
        else:
            color = 256 # bylayer
        return {'layer': layer, 'color': color}

    ## Overload virtual mathcanvas.drawable base class drawing methods

    def draw_line(self, p1, p2):
        self.__msp.add_line(self._xy(p1), self._xy(p2),
                            dxfattribs=self._attribs())

    def draw_polyline(self, points, closed=False):
        self.__msp.add_lwpolyline([self._xy(p) for p in points],
                                  close=closed,
                                  dxfattribs=self._attribs())

    def draw_circle(self, p, r, filled=False):
        if filled:
            attribs = self._attribs(self.fillcolor)
            hatch = self.__msp.add_hatch(color=attribs['color'], dxfattribs=attribs)
            hatch.paths.add_edge_path().add_arc(self._xy(p), r, 0, 360)
        self.__msp.add_circle(self._xy(p), r, dxfattribs=self._attribs())

    def draw_fill(self, region, rings, color):
        # hatch style 0 is the odd-parity (even-odd) rule
        attribs = self._attribs(color)
        hatch = self.__msp.add_hatch(color=attribs['color'], dxfattribs=attribs)
        hatch.dxf.hatch_style = 0
        for ring in rings:
            hatch.paths.add_polyline_path([self._xy(p) for p in ring],
                                          is_closed=True)

    def draw_text(self, text, location, align='LEFT', attr=None):
        if attr is None:
            attr = {'height': 12}
        alignment = {'CENTER': TextEntityAlignment.CENTER,
                     'RIGHT': TextEntityAlignment.RIGHT}.get(align, TextEntityAlignment.LEFT)
        dxfattr = self._attribs()
        if 'height' in attr:
            dxfattr['height'] = attr['height']
        self.__msp.add_text(text, dxfattribs=dxfattr).set_placement(
            self._xy(location), align=alignment)

    def draw_graph(self, graph):
        self.layer = 'FILLS'
        for region, color in graph.fills.items():
            rings = graph.curve.fills.get(region)
            if rings:
                self.draw_fill(region, rings, color)
        self.layer = 'CURVES'
        self.linecolor = graph.color
        self.draw_curve(graph.curve)

    def draw_sprite(self, sprite):
        self.layer = 'SPRITES'
        super().draw_sprite(sprite)

    def draw_axes(self, frame=None, ticks=True):
        self.layer = 'AXES'
        self.linecolor = False
        super().draw_axes(frame, ticks)

    def display(self):
        self.__doc.saveas("{}.dxf".format(self.filename))
