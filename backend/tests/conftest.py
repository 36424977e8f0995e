import xml.etree.ElementTree as ET

import pytest

from stress_scenarios.services.scenario_store import StressScenarioData

SECTIONS = [
    "DiscountCurves",
    "IndexCurves",
    "YieldCurves",
    "FxSpots",
    "FxVolatilities",
    "SwaptionVolatilities",
    "CapFloorVolatilities",
]


def build_stress_test(label="Scenario1", omit=(), **sections):
    """XML for one StressTest; every section present and empty unless given or omitted."""
    parts = []
    for name in SECTIONS:
        if name in omit:
            continue
        parts.append(f"<{name}>{sections.get(name, '')}</{name}>")
    return f'<StressTest id="{label}">{"".join(parts)}</StressTest>'


def build_document(*stress_tests):
    return f"<StressTesting>{''.join(stress_tests)}</StressTesting>"


def discount_curve(ccy="USD", shifts="0.01,0.02", tenors="1Y,2Y", shift_type="Absolute"):
    return (
        f'<DiscountCurve ccy="{ccy}"><ShiftType>{shift_type}</ShiftType>'
        f"<Shifts>{shifts}</Shifts><ShiftTenors>{tenors}</ShiftTenors></DiscountCurve>"
    )


@pytest.fixture(autouse=True)
def _reset_store():
    StressScenarioData.reset()
    yield
    StressScenarioData.reset()


@pytest.fixture
def sample_xml():
    """A document exercising every section."""
    return build_document(
        build_stress_test(
            "Parallel_Up",
            DiscountCurves=discount_curve("USD") + discount_curve("EUR", "0.005", "5Y"),
            IndexCurves=(
                '<IndexCurve index="USD-LIBOR-3M"><ShiftType>Absolute</ShiftType>'
                "<Shifts>0.001, 0.002, 0.003</Shifts><ShiftTenors>6M, 1Y, 2Y</ShiftTenors>"
                "</IndexCurve>"
            ),
            YieldCurves=(
                '<YieldCurve name="BENCHMARK_EUR"><ShiftType>Relative</ShiftType>'
                "<Shifts>0.1</Shifts><ShiftTenors>10Y</ShiftTenors></YieldCurve>"
            ),
            FxSpots=(
                '<FxSpot ccypair="EURUSD"><ShiftType>Relative</ShiftType>'
                "<ShiftSize>0.05</ShiftSize></FxSpot>"
            ),
            FxVolatilities=(
                '<FxVolatility ccypair="EURUSD"><ShiftType>Absolute</ShiftType>'
                "<Shifts>0.01,0.015</Shifts><ShiftExpiries>1M,1Y</ShiftExpiries></FxVolatility>"
            ),
            SwaptionVolatilities=(
                '<SwaptionVolatility ccy="EUR"><ShiftType>Absolute</ShiftType>'
                "<ShiftTerms>5Y,10Y</ShiftTerms><ShiftExpiries>1Y,5Y</ShiftExpiries>"
                "<Shifts><Shift>0.005</Shift>"
                '<Shift expiry="1Y" term="5Y">0.01</Shift></Shifts></SwaptionVolatility>'
            ),
            CapFloorVolatilities=(
                '<CapFloorVolatility ccy="USD"><ShiftType>Relative</ShiftType>'
                "<ShiftExpiries>1Y,5Y</ShiftExpiries><Shifts>0.1,0.2</Shifts>"
                "</CapFloorVolatility>"
            ),
        ),
        build_stress_test("Empty_Scenario"),
    )


@pytest.fixture
def sample_root(sample_xml):
    return ET.fromstring(sample_xml)
