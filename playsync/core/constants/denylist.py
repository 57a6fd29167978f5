"""Libraries that are never vendored even though they match the library prefix."""

DEFAULT_DENYLIST = frozenset(
    {
        "play-services-contextmanager",
        "play-services-measurement",
        "play-services-instantapps",
        "play-services-vision",
        "play-services-vision-common",
        "play-services-drive",
        "play-services-plus",
        "play-services-wearable",
        "play-services-games",
        "play-services-cast-framework",
        "play-services-appinvite",
        "play-services-appindexing",
        "play-services-all-wear",
        "play-services-fido",
        "play-services-gass",
        "play-services-tagmanager",
        "play-services-awareness",
        "play-services-clearcut",
        "play-services-ads",
        "play-services-ads-lite",
        "play-services-ads-identifier",
        "play-services-ads-base",
        "play-services-phenotype",
        "play-services-vision-image-label",
        "play-services-tagmanager-v4-impl",
        "play-services-tagmanager-api",
        "play-services-afs-native",
        # Umbrella artifact that pulls in everything
        "play-services",
    }
)
