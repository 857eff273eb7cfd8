import unittest

from plotly import io as pio

from lagrangefe.models import LagrangePolynomial
from lagrangefe.plotting import estimate_figure, set_plotly_template


class TestEstimateFigure(unittest.TestCase):
    def test_traces(self):
        model = LagrangePolynomial([(0, 1), (0.5, 1.25), (1, 2)])
        fig = estimate_figure(model, steps=20)

        self.assertEqual(2, len(fig.data))
        self.assertEqual(3, len(fig.data[0].x))
        self.assertEqual(21, len(fig.data[1].x))
        self.assertEqual("degree 2", fig.data[1].name)

    def test_template(self):
        set_plotly_template()
        self.assertEqual(400, pio.templates["plotly_dark"].layout.width)


if __name__ == "__main__":
    unittest.main()
