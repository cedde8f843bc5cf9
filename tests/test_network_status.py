import pytest

from webappmgr.network_status import NetworkInformation, NetworkStatus

INFO = {
    "netmask": "255.255.255.0",
    "dns1": "192.0.2.53",
    "dns2": "192.0.2.54",
    "ipAddress": "192.0.2.10",
    "method": "dhcp",
    "state": "connected",
    "gateway": "192.0.2.1",
    "interfaceName": "eth0",
    "onInternet": "yes",
}


def test_information_fields_are_read():
    info = NetworkInformation.from_json(INFO)
    assert info.netmask == INFO["netmask"]
    assert info.dns1 == INFO["dns1"]
    assert info.dns2 == INFO["dns2"]
    assert info.ip_address == INFO["ipAddress"]
    assert info.method == INFO["method"]
    assert info.state == INFO["state"]
    assert info.gateway == INFO["gateway"]
    assert info.interface_name == INFO["interfaceName"]
    assert info.on_internet == INFO["onInternet"]


def test_information_non_object_is_empty():
    assert NetworkInformation.from_json(["x"]) == NetworkInformation()
    assert NetworkInformation.from_json(None) == NetworkInformation()


def test_information_dns2_only_when_string():
    data = dict(INFO, dns2=5)
    assert NetworkInformation.from_json(data).dns2 == ""


def test_information_missing_keys_are_empty():
    info = NetworkInformation.from_json({"ipAddress": "192.0.2.10"})
    assert info.ip_address == "192.0.2.10"
    assert info.gateway == ""


def test_information_rejects_container_value():
    with pytest.raises(TypeError):
        NetworkInformation.from_json({"netmask": {"a": 1}})


def test_status_wired_preferred():
    status = NetworkStatus.from_json(
        {"returnValue": True, "wired": INFO, "wifi": {"ipAddress": "other"}}
    )
    assert status.type == "wired"
    assert status.information.ip_address == INFO["ipAddress"]
    assert status.saved_date != "" and status.return_value is True


def test_status_wifi():
    status = NetworkStatus.from_json(
        {"returnValue": True, "isInternetConnectionAvailable": True, "wifi": INFO}
    )
    assert status.type == "wifi"
    assert status.is_internet_connection_available is True
    assert status.information.interface_name == "eth0"


def test_status_falls_back_to_wifi_direct():
    status = NetworkStatus.from_json({"returnValue": True})
    assert status.type == "wifiDirect"
    assert status.information == NetworkInformation()


def test_status_return_value_false_has_no_type():
    status = NetworkStatus.from_json({"returnValue": False, "wired": INFO})
    assert status.type == ""
    assert status.information == NetworkInformation()


def test_status_non_object_is_empty():
    status = NetworkStatus.from_json("text")
    assert status == NetworkStatus()
    assert status.saved_date == ""


def test_status_rejects_string_bool():
    with pytest.raises(TypeError):
        NetworkStatus.from_json({"returnValue": "yes"})