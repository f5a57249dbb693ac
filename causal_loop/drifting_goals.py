"""
Drifting Goals archetype applied to homelessness policy.

 - B1 (balancing): Homelessness -> Public Concern -> Government Action ->
   Temporary Shelters -> less visible homelessness in the short term
 - R1 (reinforcing): Temporary Shelters draw Government Capital away from the
   Affordable Housing Program -> more Housing Insecurity -> more Homelessness

Government Capital is the limited resource both loops compete for.
"""

from .config import RenderConfig
from .geometry import DEFAULT_CONFIG
from .model import Annotation, Box, TextLine, build_diagram
from .styles import DARK_TEXT, MUTED_TEXT, FontStyle, ShapeStyle

TITLE = 'Drifting Goals: Homelessness Response'

# (name, x, y, fill)
NODES = [
    # central problem
    ('Homelessness Presence', 150, 250, '#FFB6C1'),
    # loop 1: public response
    ('Public Concern', 150, 80, '#DDA0DD'),
    ('Government Action', 400, 80, '#87CEEB'),
    ('Temporary Shelters', 650, 80, '#FFA07A'),
    # limited resource shared by both loops
    ('Government Capital', 650, 250, '#FFD700'),
    # loop 2: long-term solution
    ('Affordable Housing Program', 650, 420, '#90EE90'),
    ('Housing Insecurity', 400, 420, '#FFB6C1'),
]

EDGES = [
    # B1: short-term fix
    {'from': 'Homelessness Presence', 'to': 'Public Concern', 'sign': '+'},
    {'from': 'Public Concern', 'to': 'Government Action', 'sign': '+'},
    {'from': 'Government Action', 'to': 'Temporary Shelters', 'sign': '+'},
    {'from': 'Temporary Shelters', 'to': 'Homelessness Presence', 'sign': '–',
     'curve': -0.3, 'label': 'short-term'},
    {'from': 'Temporary Shelters', 'to': 'Government Capital', 'sign': '–',
     'label': 'draws from'},
    # R1: resource competition
    {'from': 'Government Capital', 'to': 'Affordable Housing Program', 'sign': '+'},
    {'from': 'Affordable Housing Program', 'to': 'Housing Insecurity', 'sign': '–'},
    {'from': 'Housing Insecurity', 'to': 'Homelessness Presence', 'sign': '+'},
]

HEADING = FontStyle(size=14, weight='bold')
NOTE = FontStyle(size=11, style='italic', color=MUTED_TEXT)
KEY_TITLE = FontStyle(size=10, weight='bold', color=DARK_TEXT)
KEY_TEXT = FontStyle(size=10, color=DARK_TEXT)
LEGEND_TITLE = FontStyle(size=12, weight='bold', color=DARK_TEXT, align='left')
LEGEND_TEXT = FontStyle(size=11, color=DARK_TEXT, align='left')

ANNOTATIONS = [
    Annotation('B1', (
        TextLine('B1: Short-Term Relief Loop', 400, 140, HEADING.with_(color='#0066CC')),
        TextLine('Temporary shelters reduce visible', 400, 156, NOTE),
        TextLine('homelessness & public concern', 400, 170, NOTE),
    )),
    Annotation('R1', (
        TextLine('R1: Resource Competition Loop', 400, 500, HEADING.with_(color='#CC0066')),
        TextLine('Shelters drain capital from affordable housing,', 400, 516, NOTE),
        TextLine('increasing housing insecurity & homelessness', 400, 530, NOTE),
    )),
    Annotation('key', (
        TextLine('DRIFTING GOALS KEY:', 650, 305, KEY_TITLE),
        TextLine('Limited Government Capital forces', 650, 320, KEY_TEXT),
        TextLine('choice between quick fix & real solution', 650, 335, KEY_TEXT),
    ), box=Box(520, 290, 260, 60, ShapeStyle(fill='#FFFACD', stroke='#FFD700', line_width=2))),
    Annotation('legend', (
        TextLine('Legend:', 30, 560, LEGEND_TITLE),
        TextLine('+ Positive relationship (same direction change)', 30, 580,
                 LEGEND_TEXT.with_(color='green')),
        TextLine('– Negative relationship (opposite direction change)', 30, 598,
                 LEGEND_TEXT.with_(color='red')),
        TextLine('B1: Balancing loop - Temporary shelters reduce visible homelessness '
                 '(short-term fix)', 30, 620, LEGEND_TEXT),
        TextLine('R1: Reinforcing loop - Resource drain leads to more housing insecurity '
                 '& homelessness', 30, 638, LEGEND_TEXT),
    )),
]


def drifting_goals_diagram(config: RenderConfig = DEFAULT_CONFIG):
    return build_diagram(NODES, EDGES, ANNOTATIONS, title=TITLE, config=config)
