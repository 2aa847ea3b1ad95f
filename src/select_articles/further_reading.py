"""External reading links shown under an article."""

from dataclasses import dataclass

from common.hashing import fnv1a_32


@dataclass(frozen=True)
class ReadingLink:
    url: str
    label: str


FURTHER_READING_POOL = (
    ReadingLink("https://www.invisalign.com", "Invisalign (official site)"),
    ReadingLink("https://pubmed.ncbi.nlm.nih.gov/?term=invisalign", "PubMed: Invisalign research"),
    ReadingLink("https://pubmed.ncbi.nlm.nih.gov/?term=clear+aligners", "PubMed: Clear aligners research"),
    ReadingLink(
        "https://www.mouthhealthy.org/all-topics-a-z/orthodontics",
        "MouthHealthy (ADA): Orthodontics",
    ),
    ReadingLink("https://www.nhs.uk/conditions/orthodontics/", "NHS: Orthodontics"),
    ReadingLink(
        "https://www.mayoclinic.org/tests-procedures/braces/about/pac-20384670",
        "Mayo Clinic: Braces overview",
    ),
    ReadingLink("https://www.cdc.gov/oralhealth", "CDC: Oral health"),
    ReadingLink("https://www.ajodo.org", "AJODO (orthodontic journal)"),
)


def pick_further_reading(
    key: str,
    count: int = 3,
    pool: tuple[ReadingLink, ...] = FURTHER_READING_POOL,
) -> list[ReadingLink]:
    """Pick `count` consecutive links from the pool, starting at a position hashed from `key`.

    The same key (usually the article slug) always gets the same links;
    different keys spread across the pool.
    """
    if not pool or count <= 0:
        return []
    start = fnv1a_32(key or "post") % len(pool)
    return [pool[(start + i) % len(pool)] for i in range(min(count, len(pool)))]
