def test_all_data_matches_individual_lists(client, make_team_member, make_card):
    make_team_member()
    make_card()

    data = client.get("/admin/allData").json()
    assert len(data["teams"]) == 1
    assert len(data["cards"]) == 1
    assert data["teams"] == client.get("/admin/teams").json()
    assert data["cards"] == client.get("/admin/cards").json()


def test_all_data_empty(client):
    assert client.get("/admin/allData").json() == {"teams": [], "cards": []}


def test_landing_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "team-members-container" in resp.text
    assert "/js/home.js" in resp.text


def test_admin_page(client):
    resp = client.get("/admin")
    assert resp.status_code == 200
    assert 'id="teamForm"' in resp.text
    assert 'id="cardsForm"' in resp.text


def test_static_scripts_served(client):
    resp = client.get("/js/render.js")
    assert resp.status_code == 200
    assert "renderCollection" in resp.text


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_db_status_lists_tables(client):
    tables = client.get("/db-status").json()["tables"]
    assert "Team" in tables
    assert "Cards" in tables
