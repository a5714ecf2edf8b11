"""Cube example.

This example demonstrates:
- Starting an encoder for a machine flavor
- Travel and extruding moves with absolute coordinates
- Comments in the output
- Writing the G-code and a preview plot next to this script

Draws the edges of a 1 cm cube.
"""

from pathlib import Path

from gcode_encoder import Flavor, GCodeEncoder, Position
from gcode_encoder.visualize import plot_toolpath_3d


def main():
    """Encode a 1 cm wireframe cube."""
    output_dir = Path(__file__).parent

    encoder = GCodeEncoder()
    encoder.start(Flavor.UM2)

    encoder.comment("This program will draw a 1 cm cube and export the gcode")

    encoder.comment("Move to starting position")
    encoder.move(Position(x=10, y=10, z=0, absolute=True))

    encoder.comment("Draw the base of the cube")
    for x, y in [(20, 10), (20, 20), (10, 20), (10, 10)]:
        encoder.move(Position(x=x, y=y, z=0, absolute=True), extrude=True)

    encoder.comment("Draw the top of the cube")
    encoder.move(Position(x=20, y=10, z=10, absolute=True), extrude=True)
    for x, y in [(20, 20), (10, 20), (10, 10)]:
        encoder.move(Position(x=x, y=y, z=10, absolute=True), extrude=True)

    encoder.comment("Draw the edges of the cube")
    edges = [
        (20, 10, 0),
        (20, 10, 10),
        (20, 20, 10),
        (20, 20, 0),
        (10, 20, 0),
        (10, 20, 10),
        (10, 10, 10),
        (10, 10, 0),
    ]
    for x, y, z in edges:
        encoder.move(Position(x=x, y=y, z=z, absolute=True), extrude=True)

    gcode_path = output_dir / "cube.gcode"
    encoder.write_to_file(gcode_path)
    print(f"  G-code saved: {gcode_path} ({len(encoder.get_output())} lines)")
    print(f"  Extruded: {encoder.extrusion_amount:.3f} mm³")

    plot_path = output_dir / "cube_plot.png"
    plot_toolpath_3d(encoder, title="Cube", show=False, save_path=str(plot_path))
    print(f"  Plot saved: {plot_path}")


if __name__ == "__main__":
    main()
