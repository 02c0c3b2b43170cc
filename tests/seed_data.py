from datetime import datetime


TEST_DATA = {
    'categories': [
        {'slug': 'euro game', 'description': 'Abstact games that involve little luck'},
        {'slug': 'social deduction', 'description': "Players attempt to uncover each other's hidden role"},
        {'slug': 'dexterity', 'description': 'Games involving physical skill'},
        {'slug': "children's games", 'description': 'Games suitable for children'},
    ],
    'users': [
        {
            'username': 'mallionaire',
            'name': 'haz',
            'avatar_url': 'https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg',
        },
        {
            'username': 'philippaclaire9',
            'name': 'philippa',
            'avatar_url': 'https://avatars2.githubusercontent.com/u/24604688?s=460&v=4',
        },
        {
            'username': 'bainesface',
            'name': 'sarah',
            'avatar_url': 'https://avatars2.githubusercontent.com/u/24394918?s=400&v=4',
        },
        {
            'username': 'dav3rid',
            'name': 'dave',
            'avatar_url': 'https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png',
        },
    ],
    'reviews': [
        {
            'title': 'Agricola',
            'designer': 'Uwe Rosenberg',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/974314/pexels-photo-974314.jpeg?w=700&h=700',
            'review_body': 'Farmyard fun!',
            'category': 'euro game',
            'created_at': datetime(2021, 1, 18, 10, 0, 20, 514000),
            'votes': 1,
        },
        {
            'title': 'Jenga',
            'designer': 'Leslie Scott',
            'owner': 'philippaclaire9',
            'review_img_url': 'https://images.pexels.com/photos/4473494/pexels-photo-4473494.jpeg?w=700&h=700',
            'review_body': 'Fiddly fun for all the family',
            'category': 'dexterity',
            'created_at': datetime(2021, 1, 18, 10, 1, 41, 251000),
            'votes': 5,
        },
        {
            'title': 'Ultimate Werewolf',
            'designer': 'Akihisa Okui',
            'owner': 'bainesface',
            'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
            'review_body': "We couldn't find the werewolf!",
            'category': 'social deduction',
            'created_at': datetime(2021, 1, 18, 10, 1, 41, 251000),
            'votes': 5,
        },
        {
            'title': 'Dolor reprehenderit',
            'designer': 'Gamey McGameface',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/278918/pexels-photo-278918.jpeg?w=700&h=700',
            'review_body': 'Consequat velit occaecat voluptate do. Dolor pariatur fugiat sint et proident.',
            'category': 'social deduction',
            'created_at': datetime(2021, 1, 22, 11, 35, 50, 936000),
            'votes': 7,
        },
        {
            'title': 'Proident tempor et.',
            'designer': 'Seymour Buttz',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
            'review_body': 'Labore occaecat sunt qui commodo anim anim aliqua adipisicing aliquip fugiat.',
            'category': 'social deduction',
            'created_at': datetime(2021, 1, 7, 9, 6, 8, 77000),
            'votes': 5,
        },
        {
            'title': 'Occaecat consequat officia in quis commodo.',
            'designer': 'Ollie Tabooger',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
            'review_body': 'Fugiat fugiat enim officia laborum quis. Aliquip laboris non nulla nostrud.',
            'category': 'social deduction',
            'created_at': datetime(2020, 9, 13, 14, 19, 28, 77000),
            'votes': 8,
        },
        {
            'title': 'Mollit elit qui incididunt veniam occaecat cupidatat',
            'designer': 'Avery Wunzboogerz',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
            'review_body': 'Consectetur incididunt aliquip sunt officia. Magna ex nulla consectetur laboris.',
            'category': 'social deduction',
            'created_at': datetime(2021, 1, 25, 11, 16, 54, 963000),
            'votes': 9,
        },
        {
            'title': 'One Night Ultimate Werewolf',
            'designer': 'Akihisa Okui',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
            'review_body': "We couldn't find the werewolf!",
            'category': 'social deduction',
            'created_at': datetime(2021, 1, 18, 10, 1, 41, 251000),
            'votes': 5,
        },
        {
            'title': 'A truly Quacking Game; Quacks of Quedlinburg',
            'designer': 'Wolfgang Warsch',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
            'review_body': "Ever wished you could play a game that's all about making potions?",
            'category': 'social deduction',
            'created_at': datetime(2021, 1, 18, 10, 1, 41, 251000),
            'votes': 10,
        },
        {
            'title': 'Build you own tour de Yorkshire',
            'designer': 'Asger Harding Granerud',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
            'review_body': 'Cold rain pours on the faces of your team of cyclists.',
            'category': 'social deduction',
            'created_at': datetime(2021, 1, 18, 10, 1, 41, 251000),
            'votes': 10,
        },
        {
            'title': "That's just what an evil person would say!",
            'designer': 'Fiona Lohoar',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
            'review_body': 'If you are a fan of Werewolf you will love this game.',
            'category': 'social deduction',
            'created_at': datetime(2021, 1, 18, 10, 1, 41, 251000),
            'votes': 8,
        },
        {
            'title': "Scythe; you're gonna need a bigger table!",
            'designer': 'Jamey Stegmaier',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/4200740/pexels-photo-4200740.jpeg?w=700&h=700',
            'review_body': 'Spend 30 minutes just setting up all of the boards and cards.',
            'category': 'social deduction',
            'created_at': datetime(1970, 1, 10, 2, 56, 38, 400000),
            'votes': 100,
        },
        {
            'title': "Settlers of Catan: Don't Settle For Less",
            'designer': 'Klaus Teuber',
            'owner': 'mallionaire',
            'review_img_url': 'https://images.pexels.com/photos/1153929/pexels-photo-1153929.jpeg?w=700&h=700',
            'review_body': 'You have stumbled across an uncharted island rich in natural resources.',
            'category': 'social deduction',
            'created_at': datetime(1970, 1, 10, 2, 8, 38, 400000),
            'votes': 16,
        },
    ],
    'comments': [
        {
            'body': 'I loved this game too!',
            'votes': 16,
            'author': 'bainesface',
            'review_id': 2,
            'created_at': datetime(2017, 11, 22, 12, 43, 33, 389000),
        },
        {
            'body': 'My dog loved this game too!',
            'votes': 13,
            'author': 'mallionaire',
            'review_id': 3,
            'created_at': datetime(2021, 1, 18, 10, 9, 5, 410000),
        },
        {
            'body': "I didn't know dogs could play games",
            'votes': 10,
            'author': 'philippaclaire9',
            'review_id': 3,
            'created_at': datetime(2021, 1, 18, 10, 9, 48, 110000),
        },
        {
            'body': 'EPIC board game!',
            'votes': 16,
            'author': 'bainesface',
            'review_id': 2,
            'created_at': datetime(2017, 11, 22, 12, 36, 3, 389000),
        },
        {
            'body': 'Now this is a story all about how, board games turned my life upside down',
            'votes': 13,
            'author': 'mallionaire',
            'review_id': 2,
            'created_at': datetime(2021, 1, 18, 10, 24, 5, 410000),
        },
        {
            'body': 'Not sure about dogs, but my cat likes to get involved with board games',
            'votes': 10,
            'author': 'philippaclaire9',
            'review_id': 3,
            'created_at': datetime(2021, 3, 27, 19, 49, 48, 110000),
        },
    ],
}
