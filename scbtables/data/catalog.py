from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

from .query import DimensionSelection, QuerySpecification
from ..errors import UnknownDatasetError

BASE_URL = "http://api.scb.se/OV0104/v1/doris/en/ssd/START/PR"

SPIN_CODE = "SPIN2007"
ITEM_FILTER = "item"
DEFAULT_SPIN_VALUES = ("B-E", "B", "C", "D", "E")

# trailing spaces are part of the published codes
SERVICES_SPIN_VALUES = (
    "49-53",
    "55-56",
    "61",
    "62",
    "64+69-71+73 ",
    "68",
    "69",
    "77+78+80+81 ",
    "80",
    "93+95-96",
    "TPI",
)

CPI_GROUPS = tuple(f"{i:02d}" for i in range(1, 13))


class DatasetId(str, Enum):
    IMPORT_PRICE_INDEX = "ByProductImportPriceIndex"
    EXPORT_PRICE_INDEX = "ByProductExportPriceIndex"
    HOME_SALES_PRODUCER_PRICE_INDEX = "ByProductHomeSalesProducerPriceIndex"
    PRODUCER_PRICE_INDEX = "ByProductProducerPriceIndex"
    DOMESTIC_SUPPLY_PRICE_INDEX = "ByProductDomesticSupplyPriceIndex"
    SERVICES_PRODUCER_PRICE_INDEX = "ByProductServicesProducerPriceIndex"
    CONSUMER_PRICE_INDEX = "ByProductConsumerPriceIndex"


def spin_template(
    dataset_id: DatasetId,
    url: str,
    values: Sequence[str] = DEFAULT_SPIN_VALUES,
) -> QuerySpecification:
    """Single SPIN2007 item selection shared by the producer/trade price tables."""
    return QuerySpecification(
        dataset_id=dataset_id.value,
        url=url,
        selections=(DimensionSelection(SPIN_CODE, ITEM_FILTER, values),),
    )


def _consumer_price_index() -> QuerySpecification:
    return QuerySpecification(
        dataset_id=DatasetId.CONSUMER_PRICE_INDEX.value,
        url=f"{BASE_URL}/PR0101/PR0101A/KPICOI80M",
        selections=(
            DimensionSelection(
                "VaruTjanstegrupp", "vs:VaruTjänstegrCoicopA", CPI_GROUPS
            ),
            DimensionSelection("ContentsCode", ITEM_FILTER, ("PR0101B3",)),
        ),
    )


def _build_catalog() -> Dict[DatasetId, QuerySpecification]:
    ppi = f"{BASE_URL}/PR0301/PR0301B"
    catalog = {
        DatasetId.IMPORT_PRICE_INDEX: spin_template(
            DatasetId.IMPORT_PRICE_INDEX, f"{ppi}/IMPIM07"
        ),
        DatasetId.EXPORT_PRICE_INDEX: spin_template(
            DatasetId.EXPORT_PRICE_INDEX, f"{ppi}/EXPIM07"
        ),
        DatasetId.HOME_SALES_PRODUCER_PRICE_INDEX: spin_template(
            DatasetId.HOME_SALES_PRODUCER_PRICE_INDEX, f"{ppi}/HMPIM07"
        ),
        DatasetId.PRODUCER_PRICE_INDEX: spin_template(
            DatasetId.PRODUCER_PRICE_INDEX, f"{ppi}/PPIM07"
        ),
        DatasetId.DOMESTIC_SUPPLY_PRICE_INDEX: spin_template(
            DatasetId.DOMESTIC_SUPPLY_PRICE_INDEX, f"{ppi}/ITPIM07"
        ),
        DatasetId.SERVICES_PRODUCER_PRICE_INDEX: spin_template(
            DatasetId.SERVICES_PRODUCER_PRICE_INDEX,
            f"{ppi}/TPI2005Kv07",
            values=SERVICES_SPIN_VALUES,
        ),
        DatasetId.CONSUMER_PRICE_INDEX: _consumer_price_index(),
    }
    missing = set(DatasetId) - set(catalog)
    if missing:
        raise RuntimeError(f"Catalog is missing datasets: {sorted(m.value for m in missing)}")
    return catalog


CATALOG: Dict[DatasetId, QuerySpecification] = _build_catalog()


def dataset_ids() -> List[str]:
    return [d.value for d in DatasetId]


def get_specification(dataset_id: DatasetId | str) -> QuerySpecification:
    try:
        key = DatasetId(dataset_id)
    except ValueError:
        raise UnknownDatasetError(
            f"Unknown dataset: {dataset_id!r}. Expected one of {dataset_ids()}"
        ) from None
    return CATALOG[key]


def lookup(dataset_id: DatasetId | str) -> Tuple[str, Dict[str, Any]]:
    spec = get_specification(dataset_id)
    return spec.url, spec.payload
