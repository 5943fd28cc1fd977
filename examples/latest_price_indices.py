import logging

from scbtables.data.catalog import dataset_ids
from scbtables.data.response import fetch_table
from scbtables.data.source import RequestsTransport


def main():
    logging.basicConfig(level=logging.INFO)
    transport = RequestsTransport(timeout=60.0)

    for dataset_id in dataset_ids():
        table = fetch_table(dataset_id, transport=transport)
        print(f"{table.dataset_id}: {table.title}")
        print(f"  latest period: {table.latest_observed_period}")
        print(f"  {table.row_count()} rows x {table.column_count()} columns")

        df = table.to_frame(numeric=True)
        print(df.tail().to_string(index=False))
        print()


if __name__ == "__main__":
    main()
