from pathlib import Path

import pytest


ATHLETES_CSV = """code,name,country,country_long,disciplines
1,DOE Jane,USA,United States,['Swimming']
2,ROE John,USA,United States,['Athletics']
3,SMITH Ann,FRA,France,['Swimming' 'Fencing']
4,LEE Kim,KOR,Korea,['Archery']
5,NOBODY Here,GER,Germany,['Rowing']
6,,ESP,Spain,['Judo']
"""

MEDALLISTS_CSV = """name,medal_type,country,country_long,discipline
DOE Jane,Gold Medal,USA,United States,Swimming
ROE John,Gold Medal,USA,United States,Athletics
SMITH Ann,Gold Medal,FRA,France,Fencing
LEE Kim,Gold Medal,KOR,Korea,Archery
"""

MEDALS_CSV = """medal_type,name,discipline,event
Gold Medal,Jane Doe,Swimming,100m
Silver Medal,Jane Doe,Swimming,200m
Gold Medal,John Roe,Athletics,Marathon
Bronze Medal,Ann Smith,Swimming,400m
Gold Medal,Ann Smith,Fencing,Epee
Gold Medal,Kim Lee,Archery,Recurve
Gold Medal,Ghost Person,Swimming,800m
"""


@pytest.fixture
def sources_dir(tmp_path: Path) -> Path:
    (tmp_path / "athletes.csv").write_text(ATHLETES_CSV, encoding="utf-8")
    (tmp_path / "medallists.csv").write_text(MEDALLISTS_CSV, encoding="utf-8")
    (tmp_path / "medals.csv").write_text(MEDALS_CSV, encoding="utf-8")
    return tmp_path
