"""Shared fixtures for servicetag-lookup tests."""

import json

import pytest


def make_dataset():
    """Return a small service-tag document in the published JSON shape."""
    return {
        "changeNumber": 42,
        "cloud": "Public",
        "values": [
            {
                "name": "AzureCloud.westeurope",
                "id": "AzureCloud.westeurope",
                "properties": {
                    "changeNumber": 7,
                    "region": "westeurope",
                    "regionId": 18,
                    "platform": "Azure",
                    "systemService": "",
                    "addressPrefixes": ["10.0.0.0/8", "2001:db8::/32"],
                    "networkFeatures": ["API", "NSG"],
                },
            },
            {
                "name": "AzureStorage",
                "id": "AzureStorage",
                "properties": {
                    "changeNumber": 3,
                    "region": "",
                    "regionId": 0,
                    "platform": "Azure",
                    "systemService": "AzureStorage",
                    "addressPrefixes": ["10.1.0.0/16", "bad-cidr"],
                    "networkFeatures": ["API"],
                },
            },
        ],
    }


@pytest.fixture
def dataset():
    return make_dataset()


@pytest.fixture
def dataset_file(tmp_path, dataset):
    path = tmp_path / "AzureIPs.json"
    path.write_text(json.dumps(dataset), encoding="utf-8")
    return path
