"""Tests for the load balancer commands."""

import pytest

LB_XML = (
    b"<load-balancer><name>lb1</name><subscription-id>5</subscription-id>"
    b"<state>STARTED</state>"
    b"<network><public-ip id='1' address='198.51.100.7/24'/></network>"
    b"<used-by ve-name='web' ip='10.0.0.5'/><used-by ve-name='db' ip='10.0.0.6'/>"
    b"</load-balancer>"
)


class TestLblist:
    def test_table(self, cli, api) -> None:
        api.add(
            "GET",
            "/load-balancer",
            body=b'<lb-list><load-balancer name="lb1" state="STARTED" subscription-id="5"/></lb-list>',
        )

        result = cli("lblist")

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].split() == ["NAME", "STATE", "SUBSCR_ID"]
        assert lines[1].split() == ["lb1", "STARTED", "5"]


class TestLbinfo:
    def test_summary(self, cli, api) -> None:
        api.add("GET", "/load-balancer/lb1", body=LB_XML)

        result = cli("lbinfo", "lb1")

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[:5] == [
            "LOAD BALANCER INFO",
            "             Name: lb1",
            "  Subscription ID: 5",
            "Public IP address: 198.51.100.7/24",
            "           Status: STARTED",
        ]
        assert lines[6] == "BALANCED SERVERS"
        assert lines[8].split() == ["web", "10.0.0.5"]
        assert lines[9].split() == ["db", "10.0.0.6"]

    def test_verbose(self, cli, api) -> None:
        api.add("GET", "/load-balancer/lb1", body=LB_XML)

        result = cli("lbinfo", "lb1", "-v")

        assert "used_by:\n  ve_name: web\n  ip: 10.0.0.5\n" in result.stdout


class TestLbhistory:
    def test_history(self, cli, api) -> None:
        api.add(
            "GET",
            "/load-balancer/lb1/history/3",
            body=b'<ve-history><ve-snapshot cpu="1" state="STARTED"/></ve-history>',
        )

        result = cli("lbhistory", "lb1", "-n", "3")

        assert result.exit_code == 0
        assert result.stdout.splitlines()[1].split()[-1] == "STARTED"

    def test_requires_positive_count(self, cli, api) -> None:
        result = cli("lbhistory", "lb1", "-n", "0")

        assert result.exit_code == 1
        assert "--num-records" in result.output
        assert api.requests == []


class TestLbLifecycle:
    def test_create(self, cli, api) -> None:
        api.add(
            "POST",
            "/load-balancer/5/create/lb1",
            status=202,
            body=b"<pwd-response><message>Created</message><password>x</password></pwd-response>",
        )

        result = cli("lbcreate", "lb1", "-s", "5")

        assert result.exit_code == 0
        assert result.stdout == "message: Created\npassword: x\n"

    @pytest.mark.parametrize(
        "args, method, path, expected",
        [
            (("lbrestart", "lb1"), "PUT", "/load-balancer/lb1/restart", "lb1 OK\n"),
            (("lbdelete", "lb1"), "DELETE", "/load-balancer/lb1", "lb1 OK\n"),
            (("lbattach", "lb1", "web"), "POST", "/load-balancer/lb1/web", "OK\n"),
            (("lbdetach", "lb1", "web"), "DELETE", "/load-balancer/lb1/web", "OK\n"),
        ],
    )
    def test_accepted_operations(self, cli, api, args, method, path, expected) -> None:
        api.add(method, path, status=202, body=b"OK")

        result = cli(*args)

        assert result.exit_code == 0
        assert result.stdout == expected
        assert api.last.method == method
