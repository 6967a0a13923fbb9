from geo_attendance.container import build_container


def _db(host):
    return {"host": host, "port": 3306, "user": "root", "password": "", "database": "geo_attendance"}


def test_each_container_gets_its_own_connection_factory():
    first = build_container(db_config=_db("db-a"))
    second = build_container(db_config=_db("db-b"))

    assert first.conn is not second.conn
    assert first.conn.config.host == "db-a"
    assert second.conn.config.host == "db-b"
