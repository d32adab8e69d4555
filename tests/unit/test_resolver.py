import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "style"))

from helmet_style.models import Direction, Gradient, PaintAssignment
from helmet_style.resolver import build_gradient, resolve, stop_offsets


class StopOffsetTests(unittest.TestCase):
    def test_offsets_floor_between_ends(self):
        self.assertEqual(stop_offsets(2), [0, 100])
        self.assertEqual(stop_offsets(3), [0, 50, 100])
        self.assertEqual(stop_offsets(4), [0, 33, 66, 100])
        self.assertEqual(stop_offsets(7), [0, 16, 33, 50, 66, 83, 100])

    def test_offsets_non_decreasing(self):
        for count in range(2, 40):
            offsets = stop_offsets(count)
            self.assertEqual(len(offsets), count)
            self.assertEqual(offsets[0], 0)
            self.assertEqual(offsets[-1], 100)
            self.assertEqual(offsets, sorted(offsets))

    def test_single_stop_does_not_divide_by_zero(self):
        self.assertEqual(stop_offsets(1), [0])


class ResolveTests(unittest.TestCase):
    def test_bubble_diagonal_three_stops(self):
        assignment = PaintAssignment.from_strings(bubble="#004080:#0066CC:#0099FF")
        fragment = resolve(assignment, Direction.DIAGONAL)

        self.assertEqual(len(fragment.definitions), 1)
        grad = fragment.definitions[0]
        self.assertEqual(grad.id, "grad-bubble")
        self.assertEqual([s.offset for s in grad.stops], [0, 50, 100])
        self.assertEqual([s.color for s in grad.stops], ["#004080", "#0066CC", "#0099FF"])
        self.assertEqual((grad.x1, grad.y1, grad.x2, grad.y2), (0, 20480, 20480, 0))
        self.assertIn(".bubble{fill:url(#grad-bubble)}", fragment.render_rules())

    def test_all_black_is_four_solid_rules(self):
        assignment = PaintAssignment.from_strings("#000000", "#000000", "#000000", "#000000")
        fragment = resolve(assignment, Direction.DIAGONAL)

        self.assertEqual(fragment.definitions, ())
        self.assertEqual(
            fragment.render_rules(),
            ".heart{fill:#000000}.thick-band{fill:#000000}.thin-band{fill:#000000}.bubble{fill:#000000}",
        )
        self.assertEqual(fragment.render_definitions(), "")

    def test_gradient_markup(self):
        grad = build_gradient("grad-heart", Gradient(("#00E5A0", "#0099FF")), Direction.LEFT_TO_RIGHT)
        self.assertEqual(
            grad.to_svg(),
            '<linearGradient id="grad-heart" gradientUnits="userSpaceOnUse"'
            ' x1="0" y1="10240" x2="20480" y2="10240">'
            '<stop offset="0%" stop-color="#00E5A0"/>'
            '<stop offset="100%" stop-color="#0099FF"/>'
            "</linearGradient>",
        )

    def test_all_gradients_share_direction(self):
        assignment = PaintAssignment.from_strings("#a:#b", "#c:#d", "#e:#f", "#g:#h")
        fragment = resolve(assignment, Direction.BOTTOM_TO_TOP)
        coords = {(d.x1, d.y1, d.x2, d.y2) for d in fragment.definitions}
        self.assertEqual(coords, {Direction.BOTTOM_TO_TOP.coordinates})
        self.assertEqual(len(fragment.definitions), 4)

    def test_theme_tag_namespaces_ids(self):
        assignment = PaintAssignment.from_strings(thick_band="#a:#b")
        light = resolve(assignment, Direction.DIAGONAL, "light")
        dark = resolve(assignment, Direction.DIAGONAL, "dark")
        self.assertEqual(light.definitions[0].id, "grad-thick-band-light")
        self.assertEqual(dark.definitions[0].id, "grad-thick-band-dark")
        self.assertIn(".thick-band{fill:url(#grad-thick-band-dark)}", dark.render_rules())

    def test_single_stop_gradient_keeps_gradient_path(self):
        # "#0099FF:" parses to one stop; it still renders as a gradient, not a flat fill.
        fragment = resolve(PaintAssignment.from_strings(heart="#0099FF:"), Direction.DIAGONAL)
        self.assertEqual(len(fragment.definitions), 1)
        stops = fragment.definitions[0].stops
        self.assertEqual(len(stops), 1)
        self.assertEqual((stops[0].offset, stops[0].color), (0, "#0099FF"))
        self.assertIn(".heart{fill:url(#grad-heart)}", fragment.render_rules())


if __name__ == "__main__":
    unittest.main()
