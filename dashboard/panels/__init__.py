"""Dashboard panels."""
from dashboard.panels.header import HeaderPanel
from dashboard.panels.price import PricePanel
from dashboard.panels.progress import ProgressPanel
from dashboard.panels.chart import ChartPanel
from dashboard.panels.highs import HighsPanel
from dashboard.panels.footer import FooterPanel
