"""Standalone tool for charting exported heap dump reports.

Reads a `class_footprint.parquet` (or `.json`) table written by
`tools/export_report.py` and generates an interactive bar chart of the classes
with the largest memory footprint, with instance counts shown in the hover text.

Usage examples:
  # Chart the top 20 classes next to the data file
  python tools/plot_footprint.py --data-file out/class_footprint.parquet

  # Chart the top 50 classes into a separate directory
  python tools/plot_footprint.py --data-file out/class_footprint.parquet \
    --top 50 --output-dir plots/
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Third-party library imports
import plotly.graph_objects as go
import polars as pl

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dumpstats.storage import storage_for_path

# --- Logging Setup ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("FootprintPlotTool")

REQUIRED_COLUMNS = ["name", "footprint_bytes", "instances"]
DEFAULT_TOP_N = 20


def _load_top_classes(data_file: Path, top_n: int) -> Optional[pl.DataFrame]:
    """Load the exported table and keep the `top_n` largest classes."""
    try:
        df = storage_for_path(data_file).load_dataframe(str(data_file), REQUIRED_COLUMNS)
    except Exception as e:
        logger.error(f"Failed to read {data_file}: {e}")
        return None

    if df.is_empty():
        logger.warning(f"No classes in {data_file}; nothing to plot.")
        return None

    return df.sort("footprint_bytes", descending=True).head(top_n)


def _create_footprint_figure(df: pl.DataFrame, title: str) -> go.Figure:
    """Horizontal bar chart, largest class at the top."""
    # Plotly draws horizontal bars bottom-up.
    df = df.reverse()

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=df["footprint_bytes"].to_list(),
            y=df["name"].to_list(),
            orientation="h",
            name="Footprint (bytes)",
            marker_color="indianred",
            customdata=df["instances"].to_list(),
            hovertemplate="%{y}<br>%{x} bytes<br>%{customdata} instances<extra></extra>",
        )
    )
    fig.update_layout(
        title_text=title,
        xaxis=dict(title_text="Footprint (bytes)", title_font=dict(size=14)),
        yaxis=dict(title_text="Class", type="category", tickfont=dict(size=11)),
        height=max(400, 28 * len(df) + 150),
        showlegend=False,
    )
    return fig


def _save_plotly_figure(fig: go.Figure, base_filename: str, output_dir: Path) -> Optional[Path]:
    """Save the figure as HTML and, when kaleido is installed, as PNG."""
    output_dir.mkdir(parents=True, exist_ok=True)
    plot_filename_html = output_dir / f"{base_filename}.html"
    try:
        fig.write_html(plot_filename_html)
        logger.info(f"Interactive plot saved to: {plot_filename_html}")
    except Exception as e:
        logger.error(
            f"Failed to save plot {plot_filename_html} using Plotly: {e}",
            exc_info=True,
        )
        return None

    try:
        plot_filename_png = output_dir / f"{base_filename}.png"
        fig.write_image(plot_filename_png, width=1200, height=800)
        logger.info(f"Static plot saved to: {plot_filename_png}")
    except Exception:
        logger.warning(
            "Failed to save static plot to PNG. To enable this feature, "
            "install the optional 'export' dependencies: "
            "`pip install dumpstats[export]`"
        )
    return plot_filename_html


def plot_footprint(data_file: Path, top_n: int, output_dir: Path) -> bool:
    df = _load_top_classes(data_file, top_n)
    if df is None:
        return False
    fig = _create_footprint_figure(
        df, f"Top {len(df)} classes by memory footprint ({data_file.name})"
    )
    return _save_plotly_figure(fig, f"{data_file.stem}_top{top_n}", output_dir) is not None


def main():
    parser = argparse.ArgumentParser(
        description="Generate a footprint bar chart from an exported heap dump report.",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        required=True,
        help="Required. Path to an exported class_footprint.parquet or .json file.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_N,
        help=f"Number of classes to chart. Default: {DEFAULT_TOP_N}.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory to save plots. Defaults to the data file's directory.",
    )
    args = parser.parse_args()

    if not args.data_file.is_file():
        logger.error(f"Data file not found: {args.data_file}")
        sys.exit(1)
    if args.top < 1:
        logger.error(f"--top must be >= 1, got {args.top}")
        sys.exit(1)

    output_dir = args.output_dir or args.data_file.parent
    if not plot_footprint(args.data_file, args.top, output_dir):
        sys.exit(1)


# Standard Python entry point guard.
if __name__ == "__main__":
    main()
