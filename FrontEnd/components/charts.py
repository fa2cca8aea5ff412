from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from BackEnd.core.duration import format_minutes
from FrontEnd.styles.design_tokens import COLORS, CHART_PALETTE


def _style_axes(ax):
	ax.set_facecolor(COLORS['chart_bg'])
	ax.grid(True, axis='y', alpha=0.25, linestyle='--', linewidth=0.8, color=COLORS['chart_grid'])
	ax.set_axisbelow(True)  # Grid behind bars
	ax.tick_params(axis='both', colors=COLORS['text_strong'], labelsize=9)
	for spine in ['top', 'right']:
		ax.spines[spine].set_visible(False)
	for spine in ['bottom', 'left']:
		ax.spines[spine].set_color(COLORS['chart_grid'])
		ax.spines[spine].set_linewidth(1.2)


def _empty(ax, message="No data available"):
	ax.text(0.5, 0.5, message, ha='center', va='center', fontsize=11,
	        color=COLORS['text_muted'], transform=ax.transAxes)
	ax.set_xticks([])
	ax.set_yticks([])


class SubjectChart(FigureCanvas):
	"""Bar chart of minutes per subject."""

	def __init__(self):
		self.figure = Figure(figsize=(5, 2.5))
		super().__init__(self.figure)

	def render(self, totals):
		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		_style_axes(ax)
		if not totals:
			_empty(ax)
		else:
			labels = [subject[:8] for subject in totals]
			values = list(totals.values())
			colors = [CHART_PALETTE[i % len(CHART_PALETTE)] for i in range(len(values))]
			bars = ax.bar(range(len(values)), values, color=colors, alpha=0.9)
			ax.set_xticks(range(len(values)))
			ax.set_xticklabels(labels)
			for bar, value in zip(bars, values):
				ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(),
				        format_minutes(value), ha='center', va='bottom',
				        fontsize=8, fontweight='600', color=COLORS['text_strong'])
			ax.set_ylim(bottom=0)
		ax.set_title("Study Time by Subject", fontsize=12, fontweight='bold', color=COLORS['text_strong'])
		self.figure.tight_layout()
		self.draw()


class DailyChart(FigureCanvas):
	"""Line chart of the last days' totals."""

	def __init__(self):
		self.figure = Figure(figsize=(5, 2.5))
		super().__init__(self.figure)

	def render(self, series, has_data=True):
		self.figure.clear()
		self.figure.patch.set_alpha(0.0)
		ax = self.figure.add_subplot(111)
		_style_axes(ax)
		if not has_data:
			_empty(ax)
		else:
			x = [d.strftime("%a") for d, _ in series]
			y = [minutes for _, minutes in series]
			ax.plot(range(len(y)), y, color=COLORS['primary'], linewidth=3, marker='o', markersize=5)
			ax.set_xticks(range(len(x)))
			ax.set_xticklabels(x)
			ax.set_ylim(bottom=0, top=max(y + [1]) * 1.15)
			ax.set_ylabel("Minutes", fontsize=10, color=COLORS['text_strong'])
		ax.set_title(f"Last {len(series)} Days", fontsize=12, fontweight='bold', color=COLORS['text_strong'])
		self.figure.tight_layout()
		self.draw()
