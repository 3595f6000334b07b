import os

from config import OUTPUT_DIR


def ensure_output_path(output_dir=OUTPUT_DIR):
    """Create the report directory if it doesn't exist."""
    if not os.path.exists(output_dir):
        os.makedirs(output_dir, exist_ok=True)
    return output_dir


def get_plot_path(plot_name="benchmark", output_dir=OUTPUT_DIR):
    """Get standardized path for plot files."""
    directory = ensure_output_path(output_dir)
    return os.path.join(directory, f"{plot_name}.png")


def format_move(move):
    """1-based "(row,col)" text for a 0-based move."""
    return f"({move[0] + 1},{move[1] + 1})"
