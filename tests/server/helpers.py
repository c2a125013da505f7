"""Helper factories for server tests."""

from gpsnmea.nmea import Coordinate, RMCData, VTGData


def make_rmc(mode: str = "D") -> RMCData:
    return RMCData(
        type="GNRMC",
        utc_time="211041.00",
        status="A",
        latitude=Coordinate(value=40.2498796, direction="N"),
        longitude=Coordinate(value=-3.4022512, direction="W"),
        speed="0.027",
        course="",
        utc_date="010218",
        mode=mode,
    )


def make_vtg() -> VTGData:
    return VTGData(
        type="GNVTG",
        course="054.7",
        course_magnetic="034.4",
        speed_kn="005.5",
        speed_kh="010.2",
        mode="A",
    )
