# InfluxDB transport examples

# Select a part of the code and run it as a cell (Shift+Enter) in an editor with
# Jupyter-style cell support. Comments mark the cells.

# Load settings from the environment

import os

from influxdb_transport import EndpointVersion, Options, get, get_with_options

INFLUXDB_V1_URL = os.getenv("INFLUXDB_V1_URL", "http://localhost:8086?db=example")
INFLUXDB_V2_URL = os.getenv("INFLUXDB_V2_URL", "http://localhost:8087?org=example&bucket=example")
INFLUXDB_TOKEN = os.getenv("INFLUXDB_TOKEN")


# v1: database addressing, create the database then write and read back
def v1_roundtrip() -> None:
    with get(INFLUXDB_V1_URL) as db:
        db.create_database_if_not_exists()
        db.write("cpu,host=server01 value=0.64", "cpu,host=server02 value=0.27")
        print(db.query("SELECT * FROM cpu"))


# v2: organization/bucket addressing with an API token
def v2_write() -> None:
    options = Options(endpoint_version=EndpointVersion.V2, api_token=INFLUXDB_TOKEN)
    with get_with_options(INFLUXDB_V2_URL, options) as db:
        db.write("mem,host=server01 used_percent=23.4")


if __name__ == "__main__":
    v1_roundtrip()
    v2_write()
