"""
graphgen.viz — Static figures of generated graphs (matplotlib).

Modules:
    figures — requested-vs-realized degree bars and a spring-layout drawing.
"""

from graphgen.viz.figures import draw_realization, plot_degree_comparison
