import pytest

HEADER = ("Date;Time;Global_active_power;Global_reactive_power;Voltage;"
          "Global_intensity;Sub_metering_1;Sub_metering_2;Sub_metering_3")

# data line numbers in the comments
ROWS = [
    "16/12/2006;17:24:00;4.216;0.418;234.840;18.400;0.000;1.000;17.000",  # 1
    "16/12/2006;17:25:00;5.360;0.436;233.630;23.000;0.000;1.000;16.000",  # 2
    "31/1/2007;23:59:00;0.324;0.128;243.120;1.400;0.000;0.000;0.000",     # 3
    "1/2/2007;00:00:00;0.326;0.128;243.150;1.400;0.000;0.000;0.000",      # 4
    "1/2/2007;00:01:00;?;?;?;?;?;?;?",                                     # 5
    "1/2/2007;12:00:00;2.450;0.090;239.800;10.200;0.000;1.000;18.000",    # 6
    "2/2/2007;00:00:00;3.120;0.000;240.010;13.000;1.000;2.000;0.000",     # 7
    "2/2/2007;23:59:00;3.680;0.224;240.370;15.800;0.000;2.000;18.000",    # 8
    "3/2/2007;00:00:00;3.746;0.212;240.210;16.000;0.000;1.000;17.000",    # 9
    "27/11/2010;00:00:00;0.946;0.000;240.330;4.000;0.000;0.000;0.000",    # 10
]


def write_dataset(path, rows, header=HEADER):
    path.write_text("\n".join([header] + list(rows)) + "\n")
    return str(path)


@pytest.fixture
def dataset(tmp_path):
    return write_dataset(tmp_path / "household_power_consumption.txt", ROWS)
