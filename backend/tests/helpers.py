ANDROID_URL = "https://feeds.example.com/android.top100.json"
IOS_URL = "https://feeds.example.com/ios.top100.json"

# The real feeds wrap some results in an extra array
ANDROID_FEED = [
    [
        {
            "publisher_id": "5b80f9f2c4fb6f0e9a4a1a01",
            "name": "Dragon City",
            "os": "android",
            "id": "es.socialpoint.DragonCity",
            "bundle_id": "es.socialpoint.DragonCity",
            "version": "12.4.1",
        },
        {
            "publisher_id": "5b80f9f2c4fb6f0e9a4a1a02",
            "name": "Candy Crush Saga",
            "os": "android",
            "id": "com.king.candycrushsaga",
            "bundle_id": "com.king.candycrushsaga",
            "version": "1.230.0.2",
        },
    ],
    {
        "publisher_id": "5b80f9f2c4fb6f0e9a4a1a03",
        "name": "Subway Surfers",
        "os": "android",
        "id": "com.kiloo.subwaysurf",
        "bundle_id": "com.kiloo.subwaysurf",
        "version": "3.5.0",
    },
]

IOS_FEED = [
    [
        {
            "publisher_id": 1234,
            "name": "Dragon Mania Legends",
            "os": "ios",
            "id": 1012345678,
            "bundle_id": "com.gameloft.dragonmania",
            "version": "7.1.0",
        },
    ],
]


def make_game(**overrides):
    game = {
        "publisherId": "pub-1",
        "name": "Dragon City",
        "platform": "android",
        "storeId": "es.socialpoint.DragonCity",
        "bundleId": "es.socialpoint.DragonCity",
        "appVersion": "1.0.0",
        "isPublished": True,
    }
    game.update(overrides)
    return game
