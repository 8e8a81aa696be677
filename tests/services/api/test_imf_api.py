# tests/services/api/test_imf_api.py
from __future__ import annotations

CPL = """<CompositionPlaylist>
  <Id>3f2504e0-4f89-11d3-9a0c-0305e82c3301</Id>
  <ContentTitleText>Trailer</ContentTitleText>
  <EditRate>25/1</EditRate>
  <TotalRunningTime>250</TotalRunningTime>
  <SegmentList>
    <Segment>
      <Id>9b1deb4d-3b7d-4bad-9bdd-2b0d7b3dcb6d</Id>
      <SequenceList>
        <MainImageSequence>
          <TrackId>pict-1</TrackId>
          <ResourceList>
            <Resource>
              <Id>1b9d6bcd-bbfd-4b2d-9b5d-ab8dfbbd4bed</Id>
              <EditRate>25/1</EditRate>
              <IntrinsicDuration>250</IntrinsicDuration>
            </Resource>
          </ResourceList>
        </MainImageSequence>
      </SequenceList>
    </Segment>
  </SegmentList>
</CompositionPlaylist>
"""


def test_cpl_endpoint(api_client, package_root):
    pkg = package_root / "TRAILER_IMP"
    pkg.mkdir()
    (pkg / "CPL_trailer.xml").write_text(CPL, encoding="utf-8")

    r = api_client.post("/api/imf/cpl", json={"package": "TRAILER_IMP"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["cpl_exists"] is True
    assert body["title"] == "Trailer"
    assert body["video_track_count"] == 1
    assert body["segments"][0]["tracks"][0]["type"] == "video"
    assert body["validation"]["is_valid"] is True


def test_cpl_endpoint_empty_package(api_client, package_root):
    (package_root / "EMPTY").mkdir()
    r = api_client.post("/api/imf/cpl", json={"package": "EMPTY"})
    assert r.status_code == 200
    assert r.json()["cpl_exists"] is False


def test_cpl_endpoint_rejects_escape(api_client):
    r = api_client.post("/api/imf/cpl", json={"package": "../../etc"})
    assert r.status_code == 400


def test_cpl_endpoint_missing_package(api_client):
    r = api_client.post("/api/imf/cpl", json={"package": "NOPE"})
    assert r.status_code == 404


def test_cpl_endpoint_unparsable_document(api_client, package_root):
    pkg = package_root / "BROKEN"
    pkg.mkdir()
    (pkg / "CPL_broken.xml").write_text("<CompositionPlaylist>", encoding="utf-8")
    r = api_client.post("/api/imf/cpl", json={"package": "BROKEN"})
    assert r.status_code == 422
