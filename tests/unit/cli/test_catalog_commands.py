"""Tests for the application, OS template and image commands."""

import json


class TestApplications:
    def test_applist(self, cli, api) -> None:
        api.add(
            "GET",
            "/application-template",
            body=b'<application-list><application-template id="4" name="wordpress" '
            b'for-os="centos-7"><description>Blog</description></application-template>'
            b"</application-list>",
        )

        result = cli("applist")

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].split() == ["ID", "NAME", "FOROS", "DESCRIPTION"]
        assert lines[1].split() == ["4", "wordpress", "centos-7", "Blog"]

    def test_appinfo(self, cli, api) -> None:
        api.add(
            "GET",
            "/application-template/wordpress/centos-7",
            body=b'<application-template id="4" name="wordpress" for-os="centos-7"/>',
        )

        result = cli("appinfo", "wordpress", "centos-7")

        assert result.exit_code == 0
        assert "name: wordpress\n" in result.stdout
        assert "for_os: centos-7\n" in result.stdout

    def test_appinstall_single(self, cli, api) -> None:
        api.add("PUT", "/ve/web/install/wordpress", status=202, body=b"Installing")

        result = cli("appinstall", "web", "wordpress")

        assert result.exit_code == 0
        assert result.stdout == "Installing\n"

    def test_appinstall_several(self, cli, api) -> None:
        api.add("PUT", "/ve/web/install", status=202, body=b"Installing")

        result = cli("appinstall", "web", "wordpress", "mysql")

        assert result.exit_code == 0
        assert api.last.url.params.get_list("name") == ["wordpress", "mysql"]

    def test_appreset(self, cli, api) -> None:
        api.add("POST", "/ve/web/application", status=202, body=b"Resetting")

        result = cli("appreset", "web", "mysql")

        assert result.exit_code == 0
        assert api.last.url.params.get_list("name") == ["mysql"]

    def test_appdelete(self, cli, api) -> None:
        api.add("DELETE", "/ve/web/application/mysql", status=202, body=b"Removing")

        assert cli("appdelete", "web", "mysql").stdout == "Removing\n"


class TestOslist:
    def test_all_templates(self, cli, api) -> None:
        api.add(
            "GET",
            "/template",
            body=b'<template-list><template name="centos-7" technology="CT" osType="linux"/>'
            b'<template name="win-2019" technology="VM" osType="windows"/></template-list>',
        )

        result = cli("oslist")

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].split() == ["TEMPLATE_NAME", "TECHNOLOGY", "TYPE"]
        assert lines[1].split() == ["centos-7", "CT", "linux"]
        assert lines[2].split() == ["win-2019", "VM", "windows"]

    def test_single_template(self, cli, api) -> None:
        api.add(
            "GET",
            "/template/centos-7",
            body=b'<template name="centos-7" technology="CT" osType="linux" active="true">'
            b'<option name="arch" value="x86_64"/></template>',
        )

        result = cli("oslist", "centos-7", "--verbose")

        assert result.exit_code == 0
        assert "os_type: linux\n" in result.stdout
        assert "option:\n  name: arch\n  value: x86_64\n" in result.stdout


class TestImages:
    def test_imglist(self, cli, api) -> None:
        api.add(
            "GET",
            "/image",
            body=b'<image-list><image-info name="golden" size="10" subscription-id="5" '
            b'image-of="web" created="2023-01-15 10:30:00+0000"/></image-list>',
        )

        result = cli("imglist")

        assert result.exit_code == 0
        row = result.stdout.splitlines()[1].split()
        assert row[:2] == ["golden", "10"]
        assert row[-2:] == ["5", "web"]

    def test_imginfo_json(self, cli, api) -> None:
        api.add(
            "GET",
            "/image/golden",
            body=b'<ve-image name="golden" cpu-number="2" created="2023-01-15 10:30:00+0000">'
            b'<disks id="1" type="local" primary="true" size="10"/></ve-image>',
        )

        result = cli("-o", "json", "imginfo", "golden")

        data = json.loads(result.stdout)
        assert data["cpu_number"] == 2
        assert data["created"] == "2023-01-15 10:30:00.000000+0000"
        assert data["disks"][0]["primary"] is True

    def test_imgcreate(self, cli, api) -> None:
        api.add("POST", "/image/web/5/create/golden", status=202, body=b"Creating image")

        result = cli("imgcreate", "web", "golden", "-s", "5")

        assert result.exit_code == 0
        assert result.stdout == "Creating image\n"

    def test_imgdelete(self, cli, api) -> None:
        api.add("DELETE", "/image/golden", status=202, body=b"Deleted")

        assert cli("imgdelete", "golden").stdout == "golden Deleted\n"
