from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

# Demographic row fields that are carried along but not reported
EXTRA_FIELDS = (
    'landArea',
    'raceWhite',
    'raceBlack',
    'raceHispanic',
    'raceAsian',
    'raceNativeAmerican',
    'incomeBelowPoverty',
    'incomeLessThan25',
    'incomeBetween25to50',
    'incomeBetween50to100',
    'incomeBetween100to200',
    'incomeGreater200',
    'educationHighSchoolGraduate',
    'educationBachelorOrGreater',
    'ageUnder5',
    'ageBetween5to19',
    'ageBetween20to34',
    'ageBetween35to59',
    'ageGreaterThan60',
)


@dataclass
class StateRecord:
    """Data class to hold the demographic figures of one requested state"""
    name: str
    fips_code: str = ''
    population: int = 0
    households: int = 0
    median_income: float = 0.0
    demographics: Dict[str, Any] = field(default_factory=dict)

    def update_from_row(self, row: Dict[str, Any]) -> None:
        """Fill the record from a demographic API result row"""
        self.population = int(row['population'])
        self.households = int(row['households'])
        self.median_income = float(row['medianIncome'])
        self.demographics = {key: row[key] for key in EXTRA_FIELDS if key in row}

    def to_dict(self) -> Dict[str, Any]:
        """Convert the state record to a dictionary"""
        return {
            "name": self.name,
            "fips": self.fips_code,
            "population": self.population,
            "households": self.households,
            "median_income": self.median_income,
            "demographics": self.demographics
        }


def _fips_code(item: Dict[str, Any]) -> str:
    fips = item['fips']
    if fips is None or not str(fips).strip():
        raise ValueError(f"Geography match has no FIPS code: {item!r}")
    return str(fips).strip()


@dataclass
class GeographyMatch:
    geography_type: str
    name: str
    fips: str
    state_code: str


@dataclass
class GeographyResponse:
    """Decoded body of the state lookup endpoint"""
    status: Optional[str]
    response_time: Optional[int]
    message: List[Any]
    states: List[GeographyMatch]

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> 'GeographyResponse':
        # Missing keys, wrong types and blank FIPS codes surface as KeyError/TypeError/ValueError
        results = payload['Results']
        states = [
            GeographyMatch(
                geography_type=item.get('geographyType', ''),
                name=item.get('name', ''),
                fips=_fips_code(item),
                state_code=item.get('stateCode', '')
            )
            for item in (results.get('state') or [])
        ]
        return cls(
            status=payload.get('status'),
            response_time=payload.get('responseTime'),
            message=payload.get('message') or [],
            states=states
        )


@dataclass
class DemographicResponse:
    """Decoded body of the demographic endpoint"""
    status: Optional[str]
    response_time: Optional[int]
    message: List[Any]
    rows: List[Dict[str, Any]]

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> 'DemographicResponse':
        rows = payload['Results'] or []
        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            raise TypeError("Results must be a list of objects")
        return cls(
            status=payload.get('status'),
            response_time=payload.get('responseTime'),
            message=payload.get('message') or [],
            rows=rows
        )
