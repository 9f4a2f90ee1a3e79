import pytest


@pytest.fixture
def ksmo_metar() -> str:
    """Plain VFR report without a T group."""
    return "KSMO 251853Z 25008KT 10SM FEW250 22/12 A3005"


@pytest.fixture
def precise_metar() -> str:
    """US report with a remarks T group giving tenths of a degree."""
    return (
        "METAR KDEN 011753Z 16012G20KT 10SM FEW080 SCT200 31/04 A3012 "
        "RMK AO2 SLP110 T03110044="
    )


@pytest.fixture
def icao_metar() -> str:
    """European report with a QNH group and negative temperatures."""
    return "METAR EFHK 120950Z 36012KT 1/2SM -SN FZFG BKN003 OVC008 M05/M10 Q1013"


@pytest.fixture
def sample_metars(ksmo_metar, precise_metar, icao_metar) -> dict:
    """Reports by station identifier."""
    return {
        'KSMO': ksmo_metar,
        'KDEN': precise_metar,
        'EFHK': icao_metar,
    }
