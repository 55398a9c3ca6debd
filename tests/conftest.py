import pytest

from data_summarizer import Summarizer, SummarizerSettings
from data_summarizer.parsing import RowParser


SALES_CSV = (
    "order_id,region,amount,order_date,note\n"
    "1,north,10.5,2024-01-01,first order\n"
    "2,south,20,2024-01-02,\n"
    "3,north,,2024-01-03,\"rush, gift wrap\"\n"
    "4,north,7.25,2024-01-04,\"said \"\"thanks\"\"\"\n"
    "5,south,12,2024-01-05,repeat customer\n"
    "6,north,3,2024-01-06,\n"
)


@pytest.fixture
def parser():
    return RowParser()


@pytest.fixture
def summarizer():
    return Summarizer(SummarizerSettings())


@pytest.fixture
def sales_csv():
    return SALES_CSV
