import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.dates as mdates
import matplotlib.pyplot as plt
import pandas as pd

FIGSIZE = (4.8, 4.8)  # 480x480 px at 100 dpi
DPI = 100

SUB_METERING = [
    ('Sub_metering_1', 'black'),
    ('Sub_metering_2', 'red'),
    ('Sub_metering_3', 'blue'),
]


def _weekday_axis(ax, timestamps: pd.Series) -> None:
    # one tick per midnight, through the day after the last reading
    first = timestamps.min().normalize()
    last = timestamps.max().normalize() + pd.Timedelta(days=1)
    ax.set_xticks(pd.date_range(first, last, freq='D').to_pydatetime())
    ax.xaxis.set_major_formatter(mdates.DateFormatter('%a'))


def _active_power(ax, df, ylabel):
    ax.plot(df['Timestamp'], df['Global_active_power'], color='black', linewidth=0.8)
    ax.set_xlabel('')
    ax.set_ylabel(ylabel)
    _weekday_axis(ax, df['Timestamp'])


def _sub_metering(ax, df, frameon=True):
    for col, color in SUB_METERING:
        ax.plot(df['Timestamp'], df[col], color=color, linewidth=0.8, label=col)
    ax.set_xlabel('')
    ax.set_ylabel('Energy sub metering')
    ax.legend(loc='upper right', frameon=frameon)
    _weekday_axis(ax, df['Timestamp'])


def _save(fig, output_dir: str, name: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    plot_filename = os.path.join(output_dir, f"{name}.png")
    fig.tight_layout()
    fig.savefig(plot_filename, dpi=DPI)
    plt.close(fig)
    print(f"Plot successfully saved to {plot_filename}")
    return plot_filename


def plot2(df: pd.DataFrame, output_dir: str = ".") -> str:
    """Global active power over the window."""
    fig, ax = plt.subplots(figsize=FIGSIZE)
    _active_power(ax, df, 'Global Active Power (kilowatts)')
    return _save(fig, output_dir, 'plot2')


def plot3(df: pd.DataFrame, output_dir: str = ".") -> str:
    """The three sub-metering channels with a legend."""
    fig, ax = plt.subplots(figsize=FIGSIZE)
    _sub_metering(ax, df)
    return _save(fig, output_dir, 'plot3')


def plot4(df: pd.DataFrame, output_dir: str = ".") -> str:
    """
    2x2 grid:
      active power    | voltage
      sub metering    | reactive power
    """
    fig, axes = plt.subplots(2, 2, figsize=FIGSIZE)

    _active_power(axes[0, 0], df, 'Global Active Power')

    ax = axes[0, 1]
    ax.plot(df['Timestamp'], df['Voltage'], color='black', linewidth=0.8)
    ax.set_xlabel('datetime')
    ax.set_ylabel('Voltage')
    _weekday_axis(ax, df['Timestamp'])

    _sub_metering(axes[1, 0], df, frameon=False)

    ax = axes[1, 1]
    ax.plot(df['Timestamp'], df['Global_reactive_power'], color='black', linewidth=0.8)
    ax.set_xlabel('datetime')
    ax.set_ylabel('Global_reactive_power')
    _weekday_axis(ax, df['Timestamp'])

    return _save(fig, output_dir, 'plot4')


PLOTS = {
    'plot2': plot2,
    'plot3': plot3,
    'plot4': plot4,
}


def render(variant: str, df: pd.DataFrame, output_dir: str = ".") -> str:
    if variant not in PLOTS:
        raise ValueError(f"Unknown plot '{variant}', expected one of {sorted(PLOTS)}")
    return PLOTS[variant](df, output_dir)
